"""Evaluation – FeatureService and wiring helpers."""
from feature_switches.evaluation.service import FeatureService
from feature_switches.evaluation.factory import build_feature_service

__all__ = ["FeatureService", "build_feature_service"]
