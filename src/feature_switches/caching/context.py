"""Caching – ambient cache context accessors."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Protocol

_CACHE_CONTEXT: ContextVar[Any] = ContextVar("_feature_switches_cache_context", default=None)


class FeatureCacheContextAccessor(Protocol):
    """Port: the opaque "who is asking" value mixed into cache fingerprints.

    The engine never interprets the value; it is only serialised and hashed.
    """

    def get_context(self) -> Any: ...


class EmptyFeatureCacheContextAccessor:
    """No ambient context: results are cached per evaluation context only."""

    def get_context(self) -> Any:
        return None


class ScopedCacheContext:
    """Ambient cache context stored in a ``ContextVar``.

    Each asyncio task (and thread) sees its own value::

        with ScopedCacheContext.scope({"tenant": "acme"}):
            await features.is_on("NewCheckout")
    """

    @staticmethod
    def set(value: Any) -> None:
        _CACHE_CONTEXT.set(value)

    @staticmethod
    def get() -> Any:
        return _CACHE_CONTEXT.get()

    @staticmethod
    def clear() -> None:
        _CACHE_CONTEXT.set(None)

    @staticmethod
    @contextmanager
    def scope(value: Any) -> Iterator[None]:
        token = _CACHE_CONTEXT.set(value)
        try:
            yield
        finally:
            _CACHE_CONTEXT.reset(token)


class ScopedCacheContextAccessor:
    """Reads the ambient value set through :class:`ScopedCacheContext`."""

    def get_context(self) -> Any:
        return ScopedCacheContext.get()


__all__ = [
    "EmptyFeatureCacheContextAccessor",
    "FeatureCacheContextAccessor",
    "ScopedCacheContext",
    "ScopedCacheContextAccessor",
]
