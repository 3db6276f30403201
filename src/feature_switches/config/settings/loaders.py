"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from feature_switches.config.settings.base import Settings
from feature_switches.config.validation import MissingRequiredSettingError, SettingParseError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(raw)


# field annotations are strings under postponed evaluation
_PARSERS: dict[str, Any] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
    "str": str,
}


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Field ``cache_ttl_seconds`` of ``FeatureSwitchesSettings`` is read from
    ``FEATURE_SWITCHES_CACHE_TTL_SECONDS``.  Unset variables keep the field
    default.  Pass *environ* to read from a mapping instead of
    :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            kwargs[field.name] = self._parse(env_key, raw, field.type)

        return settings_class(**kwargs)

    @staticmethod
    def _parse(env_key: str, raw: str, type_hint: Any) -> Any:
        type_name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))
        parser = _PARSERS.get(type_name, str)
        try:
            return parser(raw)
        except ValueError as exc:
            raise SettingParseError(env_key, raw, type_name, cause=exc) from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
