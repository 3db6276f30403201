"""Observability – structured logging."""

from feature_switches.observability.logging import CacheContextProcessor, JsonLoggerFactory, get_logger

__all__ = ["CacheContextProcessor", "JsonLoggerFactory", "get_logger"]
