"""Testing support – run a test against every relevant feature combination.

The helpers build :class:`~feature_switches.definitions.FeatureDefinition`
lists that the test loads into its own provider, so each invocation passes
its feature state explicitly.
"""

from feature_switches.testing.combinations import FeatureTestValue, feature_test_combinations
from feature_switches.testing.parametrize import feature_case_id, feature_test

__all__ = [
    "FeatureTestValue",
    "feature_case_id",
    "feature_test",
    "feature_test_combinations",
]
