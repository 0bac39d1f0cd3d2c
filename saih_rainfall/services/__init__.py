"""Services subpackage.

Each step of the readings pipeline lives in its own module:
fetcher -> parser -> decoder (with the province directory) -> cache.
"""

from .cache import FreshnessCache
from .pipeline import RainfallPipeline
from .provinces import ProvinceDirectory, ProvinceEntry

__all__ = ["FreshnessCache", "RainfallPipeline", "ProvinceDirectory", "ProvinceEntry"]
