"""Serialization errors: payloads that cannot be encoded or decoded."""

from __future__ import annotations

from typing import Any

from feature_switches.kernel.errors.base import FeatureSwitchesError


class SerializationError(FeatureSwitchesError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["SerializationError"]
