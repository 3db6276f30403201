"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class CacheContextProcessor:
    """structlog processor that injects the ambient cache context.

    When a :class:`~feature_switches.caching.ScopedCacheContext` value is active
    it is added to every event as ``cache_context``.

    Usage::

        import structlog
        from feature_switches.observability.logging import CacheContextProcessor

        structlog.configure(processors=[CacheContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from feature_switches.caching.context import ScopedCacheContext

        value = ScopedCacheContext.get()
        if value is not None:
            event_dict.setdefault("cache_context", value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["CacheContextProcessor", "get_logger"]
