"""Unit tests for cache fingerprints and cache context accessors."""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from feature_switches.caching import (
    EmptyFeatureCacheContextAccessor,
    ScopedCacheContext,
    ScopedCacheContextAccessor,
    cache_fingerprint,
)
from feature_switches.filters import ParallelChange
from feature_switches.kernel.errors import SerializationError

_json_values = st.recursive(
    st.none() | st.booleans() | st.integers(min_value=-(2**53), max_value=2**53) | st.text(),
    lambda children: st.lists(children, max_size=3) | st.dictionaries(st.text(), children, max_size=3),
    max_leaves=10,
)


class TestCacheFingerprint:
    def test_empty_when_no_context(self) -> None:
        assert cache_fingerprint(None, None) == ""

    def test_is_sha256_hex(self) -> None:
        key = cache_fingerprint(None, "Migrated")
        assert len(key) == 64
        int(key, 16)

    def test_key_order_does_not_matter(self) -> None:
        assert cache_fingerprint({"a": 1, "b": 2}, None) == cache_fingerprint({"b": 2, "a": 1}, None)

    def test_ambient_and_evaluation_are_distinguished(self) -> None:
        assert cache_fingerprint("x", None) != cache_fingerprint(None, "x")

    def test_enum_matches_its_value(self) -> None:
        assert cache_fingerprint(None, ParallelChange.EXPANDED) == cache_fingerprint(None, "Expanded")

    def test_unserialisable_context(self) -> None:
        with pytest.raises(SerializationError):
            cache_fingerprint(None, object())

    @given(ambient=_json_values, evaluation=_json_values)
    def test_deterministic(self, ambient: object, evaluation: object) -> None:
        assert cache_fingerprint(ambient, evaluation) == cache_fingerprint(ambient, evaluation)


class TestCacheContextAccessors:
    def test_empty_accessor(self) -> None:
        assert EmptyFeatureCacheContextAccessor().get_context() is None

    def test_scope_restores_previous(self) -> None:
        accessor = ScopedCacheContextAccessor()
        with ScopedCacheContext.scope("outer"):
            with ScopedCacheContext.scope("inner"):
                assert accessor.get_context() == "inner"
            assert accessor.get_context() == "outer"
        assert accessor.get_context() is None

    def test_tasks_are_isolated(self) -> None:
        async def read_in_task(value: str) -> object:
            ScopedCacheContext.set(value)
            await asyncio.sleep(0)
            return ScopedCacheContext.get()

        async def scenario() -> list[object]:
            return list(await asyncio.gather(read_in_task("a"), read_in_task("b")))

        assert asyncio.run(scenario()) == ["a", "b"]
        assert ScopedCacheContext.get() is None

    def test_clear(self) -> None:
        async def scenario() -> object:
            ScopedCacheContext.set("x")
            ScopedCacheContext.clear()
            return ScopedCacheContext.get()

        assert asyncio.run(scenario()) is None
