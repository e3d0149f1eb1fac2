"""Package for the on-disk freshness cache."""

from .cache import DEFAULT_CATEGORY, CacheLoadError, FreshnessCache

__all__ = ["FreshnessCache", "CacheLoadError", "DEFAULT_CATEGORY"]
