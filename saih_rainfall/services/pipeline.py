from __future__ import annotations

import time
from typing import List, Optional, Tuple

import structlog

from ..config import DEFAULT_TABLE_ID, AppSettings
from ..schemas.readings import Reading
from .cache import FreshnessCache
from .decoder import decode_rows
from .fetcher import PageFetcher
from .parser import parse_rows
from .provinces import ProvinceDirectory

logger = structlog.get_logger()


class RainfallPipeline:
    """Serves gauge readings, refetching the source page when the cache is stale.

    A refresh is fetch -> parse -> decode. Any ``PipelineError`` it raises
    reaches the caller unchanged and the cached readings stay as they were.
    """

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        directory: Optional[ProvinceDirectory] = None,
        cache: Optional[FreshnessCache] = None,
        table_id: str = DEFAULT_TABLE_ID,
    ) -> None:
        self.fetcher = fetcher or PageFetcher()
        self.directory = directory or ProvinceDirectory()
        self.cache = cache or FreshnessCache()
        self.table_id = table_id

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "RainfallPipeline":
        return cls(
            fetcher=PageFetcher(
                url=settings.source_url,
                timeout_connect=settings.fetch_timeout_connect_s,
                timeout_read=settings.fetch_timeout_read_s,
                user_agent=settings.user_agent,
            ),
            directory=ProvinceDirectory.with_exceptions(settings.province_exceptions),
            cache=FreshnessCache(ttl_s=settings.cache_ttl_s),
            table_id=settings.table_id,
        )

    def readings(self) -> Tuple[Reading, ...]:
        return self.cache.get_or_refresh(self.refresh)

    def refresh(self) -> List[Reading]:
        start = time.perf_counter()
        markup = self.fetcher.fetch()
        rows = parse_rows(markup, table_id=self.table_id)
        readings = decode_rows(rows, self.directory)
        dur_ms = int((time.perf_counter() - start) * 1000)
        logger.info("rainfall_refresh_completed", rows=len(readings), duration_ms=dur_ms)
        return readings
