"""Config settings – FeatureSwitchesSettings."""
from __future__ import annotations

import dataclasses
from datetime import timedelta
from typing import ClassVar

from feature_switches.config.settings.base import Settings
from feature_switches.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class FeatureSwitchesSettings(Settings):
    """Runtime options of the evaluation engine.

    Environment variables use the ``FEATURE_SWITCHES_`` prefix, e.g.
    ``FEATURE_SWITCHES_STRICT_VALUES=false``.

    Attributes:
        strict_values: When true, a stored value that does not match the type
            requested by the caller raises ``ValueConversionError``.  When
            false, it is converted leniently and falls back to the default.
        cache_enabled: Build an in-memory evaluation cache by default.
        cache_ttl_seconds: Expiry of cached evaluations; ``0`` never expires.
        log_evaluations: Emit a debug log event for every evaluation.
    """

    _prefix: ClassVar[str] = "FEATURE_SWITCHES"

    strict_values: bool = True
    cache_enabled: bool = True
    cache_ttl_seconds: float = 0.0
    log_evaluations: bool = False

    def _validate(self) -> None:
        if self.cache_ttl_seconds < 0:
            raise InvalidSettingValueError(
                "cache_ttl_seconds", self.cache_ttl_seconds, "must be >= 0"
            )

    @property
    def cache_ttl(self) -> timedelta | None:
        if not self.cache_ttl_seconds:
            return None
        return timedelta(seconds=self.cache_ttl_seconds)


__all__ = ["FeatureSwitchesSettings"]
