"""Evaluation errors: raised while computing a feature value."""

from __future__ import annotations

from typing import Any

from feature_switches.kernel.errors.base import FeatureSwitchesError


class EvaluationError(FeatureSwitchesError):
    """Feature evaluation could not complete."""

    default_code = "evaluation_error"


class UnknownFilterError(EvaluationError):
    """A filter definition names a filter that is not registered."""

    default_code = "unknown_filter"

    def __init__(self, filter_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown feature filter '{filter_name}'",
            detail={"filter": filter_name},
            **kwargs,
        )
        self.filter_name = filter_name


class ValueConversionError(EvaluationError):
    """The evaluated value cannot be converted to the requested type."""

    default_code = "value_conversion_error"

    def __init__(self, feature: str, value_type: Any, **kwargs: Any) -> None:
        type_name = getattr(value_type, "__name__", repr(value_type))
        super().__init__(
            f"Value of feature '{feature}' cannot be converted to {type_name}",
            detail={"feature": feature, "value_type": type_name},
            **kwargs,
        )
        self.value_type = value_type


class InvalidEvaluationContextError(EvaluationError):
    """A contextual filter received an evaluation context it cannot interpret."""

    default_code = "invalid_evaluation_context"

    def __init__(self, feature: str, filter_name: str, context: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Filter '{filter_name}' of feature '{feature}' cannot use evaluation context {context!r}",
            detail={"feature": feature, "filter": filter_name, "context_type": type(context).__name__},
            **kwargs,
        )
        self.filter_name = filter_name
        self.context = context


__all__ = [
    "EvaluationError",
    "InvalidEvaluationContextError",
    "UnknownFilterError",
    "ValueConversionError",
]
