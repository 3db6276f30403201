"""Root error class of the feature-switches error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class FeatureSwitchesError(Exception):
    """Root of every error raised by the library.

    Each error carries a machine-readable ``code`` (``default_code`` of the
    class unless overridden) and a ``detail`` mapping naming the feature,
    filter or setting involved, so callers can branch and log without
    parsing the message.

    Args:
        message: Human-readable description.
        code: Overrides ``default_code``.
        detail: JSON-compatible context.
        cause: Exception that triggered this one; also set as ``__cause__``.
    """

    default_code: str = "feature_switches_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def feature(self) -> str | None:
        """The feature the error is about, when there is one."""
        return self.detail.get("feature")

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event (``error_code``, detail keys)."""
        fields: dict[str, Any] = {"error_code": self.code}
        fields.update({k: v for k, v in self.detail.items() if v is not None})
        return fields

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


__all__ = ["FeatureSwitchesError"]
