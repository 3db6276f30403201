"""Unit tests for structured logging helpers."""

from __future__ import annotations

import logging

import structlog

from feature_switches.caching import ScopedCacheContext
from feature_switches.observability.logging import (
    CacheContextProcessor,
    JsonLoggerFactory,
    get_logger,
)


class TestCacheContextProcessor:
    def test_injects_active_context(self) -> None:
        processor = CacheContextProcessor()
        with ScopedCacheContext.scope("customer-a"):
            event = processor(None, "info", {"event": "x"})
        assert event["cache_context"] == "customer-a"

    def test_without_context(self) -> None:
        event = CacheContextProcessor()(None, "info", {"event": "x"})
        assert "cache_context" not in event

    def test_does_not_override(self) -> None:
        with ScopedCacheContext.scope("customer-a"):
            event = CacheContextProcessor()(None, "info", {"cache_context": "explicit"})
        assert event["cache_context"] == "explicit"


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        log = get_logger("feature_switches.test", component="tests")
        assert hasattr(log, "info")
        assert hasattr(log, "bind")

    def test_logs_through_capture(self) -> None:
        with structlog.testing.capture_logs() as captured:
            get_logger("x").info("feature.evaluated", feature="A")
        assert captured[0]["event"] == "feature.evaluated"
        assert captured[0]["feature"] == "A"


class TestJsonLoggerFactory:
    def test_configure_installs_single_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            JsonLoggerFactory.configure(level=logging.DEBUG)
            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()
