"""
feature_switches – feature switch evaluation library.

Import path convention::

    from feature_switches.definitions import InMemoryFeatureDefinitionProvider
    from feature_switches.evaluation import FeatureService, build_feature_service
    from feature_switches.filters import FilterRegistry, ParallelChange
    from feature_switches.caching import InMemoryFeatureCache, ScopedCacheContext
    from feature_switches.kernel.errors import UndefinedGroupError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
