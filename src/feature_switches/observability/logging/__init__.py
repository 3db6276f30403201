"""Observability – structured logging helpers."""
from feature_switches.observability.logging.factory import JsonLoggerFactory
from feature_switches.observability.logging.processors import CacheContextProcessor, get_logger

__all__ = ["CacheContextProcessor", "JsonLoggerFactory", "get_logger"]
