"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import ClassVar, TypeVar

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<_prefix>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and override :meth:`_validate` for range and
    cross-field checks; validation runs on every construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    @classmethod
    def from_env(cls: type[S], environ: Mapping[str, str] | None = None) -> S:
        """Shorthand for ``EnvSettingsLoader(environ).load(cls)``."""
        from feature_switches.config.settings.loaders import EnvSettingsLoader

        return EnvSettingsLoader(environ).load(cls)


__all__ = ["Settings"]
