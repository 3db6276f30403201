"""Caching – SessionFeatureCache."""
from __future__ import annotations

import json
import zlib

from feature_switches.caching.protocol import EvaluationCacheResult, FeatureCacheOptions
from feature_switches.kernel.errors import SerializationError

__all__ = ["SessionFeatureCache"]


class SessionFeatureCache:
    """Evaluation cache for one user session, keyed by feature name only.

    The context fingerprint is ignored: within a session it is always the
    same.  The first value computed for a feature sticks for the session.
    :meth:`get_state` exports the cache as a compact blob (e.g. for a cookie
    or session store); :meth:`load_state` restores it and freezes it, so a
    restored session keeps seeing the same values even when definitions
    change.

    Not thread-safe; create one instance per session.
    """

    def __init__(self) -> None:
        self._state: dict[str, bytes | None] = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def get_item(self, feature: str, context: str) -> EvaluationCacheResult | None:  # noqa: ARG002
        if feature not in self._state:
            return None
        return EvaluationCacheResult(self._state[feature])

    async def set_item(
        self,
        feature: str,
        context: str,  # noqa: ARG002
        value: bytes | None,
        options: FeatureCacheOptions | None = None,  # noqa: ARG002
    ) -> None:
        if not self._loaded:
            self._state[feature] = value

    async def remove(self, feature: str) -> None:
        if not self._loaded:
            self._state.pop(feature, None)

    def reset_state(self) -> None:
        self._loaded = False
        self._state.clear()

    def get_state(self) -> bytes:
        """Return the session state as deflate-compressed JSON."""
        document = {
            feature: None if value is None else value.decode()
            for feature, value in self._state.items()
        }
        return zlib.compress(json.dumps(document, separators=(",", ":")).encode(), level=9)

    def load_state(self, state: bytes) -> None:
        try:
            document = json.loads(zlib.decompress(state))
        except (zlib.error, ValueError) as exc:
            raise SerializationError(
                "Invalid session cache state", payload_type="SessionFeatureCache", cause=exc
            ) from exc
        if not isinstance(document, dict):
            raise SerializationError("Invalid session cache state", payload_type="SessionFeatureCache")
        self._state = {
            str(feature): None if value is None else str(value).encode()
            for feature, value in document.items()
        }
        self._loaded = True
