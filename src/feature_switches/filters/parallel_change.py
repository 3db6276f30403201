"""Filters – ParallelChangeFeatureFilter."""
from __future__ import annotations

from feature_switches.filters.base import ContextualFeatureFilter, FeatureFilterEvaluationContext
from feature_switches.filters.settings import ParallelChange, ScalarValueSetting
from feature_switches.kernel.errors import InvalidEvaluationContextError, InvalidFilterSettingsError

# Stages of the evaluation context accepted by each configured stage.
_ACCEPTED: dict[ParallelChange, frozenset[ParallelChange]] = {
    ParallelChange.EXPANDED: frozenset({ParallelChange.EXPANDED}),
    ParallelChange.MIGRATED: frozenset({ParallelChange.EXPANDED, ParallelChange.MIGRATED}),
    ParallelChange.CONTRACTED: frozenset(ParallelChange),
}


class ParallelChangeFeatureFilter(ContextualFeatureFilter[ParallelChange]):
    """Three-stage rollout: Expanded → Migrated → Contracted.

    The settings hold the stage the system has reached; callers ask about a
    stage through the evaluation context.  Each later setting includes the
    earlier stages.  Without an evaluation context the filter answers for
    :attr:`ParallelChange.MIGRATED`, so a plain ``is_on`` tells whether the
    migration is done.

    Typical use::

        if not await features.is_on("Orders", ParallelChange.CONTRACTED):
            write_old_columns()
        if await features.is_on("Orders", ParallelChange.EXPANDED):
            write_new_columns()
    """

    name = "ParallelChange"

    async def is_on(
        self,
        context: FeatureFilterEvaluationContext,
        evaluation_context: ParallelChange | str | None,
    ) -> bool:
        setting = self._setting(context)
        return self._stage(context, evaluation_context) in _ACCEPTED[setting]

    @staticmethod
    def _stage(context: FeatureFilterEvaluationContext, evaluation_context: object) -> ParallelChange:
        if evaluation_context is None:
            return ParallelChange.MIGRATED
        if isinstance(evaluation_context, str):
            try:
                return ParallelChange(evaluation_context)
            except ValueError as exc:
                raise InvalidEvaluationContextError(
                    context.feature,
                    context.filter_name or ParallelChangeFeatureFilter.name,
                    evaluation_context,
                    cause=exc,
                ) from exc
        raise InvalidEvaluationContextError(
            context.feature,
            context.filter_name or ParallelChangeFeatureFilter.name,
            evaluation_context,
        )

    @staticmethod
    def _setting(context: FeatureFilterEvaluationContext) -> ParallelChange:
        if isinstance(context.settings, str):
            setting = context.try_get_settings(ParallelChange)
        else:
            scalar = context.try_get_settings(ScalarValueSetting[ParallelChange])
            setting = None if scalar is None else scalar.setting
        if setting is None:
            raise InvalidFilterSettingsError(
                context.filter_name or ParallelChangeFeatureFilter.name,
                context.feature,
                "expected a ParallelChange stage",
            )
        return setting


__all__ = ["ParallelChangeFeatureFilter"]
