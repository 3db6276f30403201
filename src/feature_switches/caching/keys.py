"""Caching – deterministic evaluation context fingerprints."""
from __future__ import annotations

import hashlib
import json
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from feature_switches.kernel.errors import SerializationError

__all__ = ["cache_fingerprint"]


def cache_fingerprint(ambient: Any, evaluation_context: Any) -> str:
    """Key that scopes a cached evaluation to who is asking and with what context.

    Returns ``""`` when both values are ``None``; otherwise the SHA-256 hex
    digest of the canonical JSON of ``{"Exec": ambient, "Eval": evaluation_context}``.
    Equal values always produce the same key.
    """
    if ambient is None and evaluation_context is None:
        return ""
    try:
        payload = to_jsonable_python({"Exec": ambient, "Eval": evaluation_context})
    except PydanticSerializationError as exc:
        raise SerializationError(
            "Cache context is not JSON serialisable",
            payload_type=type(evaluation_context if evaluation_context is not None else ambient).__name__,
            cause=exc,
        ) from exc
    # deterministic: sorted keys, compact separators
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()
