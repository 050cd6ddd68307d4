"""
Neighborhood trend aggregation.

A trend samples the size of one participant's neighborhood at every date
on which any link in the network changed state. Samples are kept in a
TrendCache so repeated requests only compute the dates they have not
seen yet.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..status import NetworkStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trend:
    """Date -> neighborhood size series for one seed participant"""

    status: NetworkStatus
    seed_id: str
    series: dict[date, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.series)


class TrendCache:
    """Per-seed cache of neighborhood sizes keyed by date.

    Entries are only ever added. A cached (seed, date) sample is reused as
    is on every later request.
    """

    def __init__(self) -> None:
        self._series: dict[str, dict[date, int]] = {}
        self._hit_count = 0
        self._miss_count = 0

    def get(self, seed_id: str, when: date) -> int | None:
        """Return the cached size, or None when the date was never sampled."""
        size = self._series.get(seed_id, {}).get(when)
        if size is None:
            self._miss_count += 1
        else:
            self._hit_count += 1
        return size

    def record(self, seed_id: str, when: date, size: int) -> bool:
        """Store a sample unless one exists already.

        Returns:
            True if the sample was stored
        """
        series = self._series.setdefault(seed_id, {})
        if when in series:
            return False
        series[when] = size
        return True

    def series(self, seed_id: str) -> dict[date, int]:
        """Copy of the cached series for a seed, in date order."""
        return dict(sorted(self._series.get(seed_id, {}).items()))

    def seeds(self) -> frozenset[str]:
        return frozenset(self._series)

    def clear(self) -> None:
        """Drop every cached series."""
        count = sum(len(s) for s in self._series.values())
        self._series.clear()
        logger.info(f"Cleared {count} cached trend samples")

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache stats
        """
        total_requests = self._hit_count + self._miss_count
        hit_rate = self._hit_count / total_requests if total_requests > 0 else 0.0

        return {
            "seed_count": len(self._series),
            "sample_count": sum(len(s) for s in self._series.values()),
            "hit_count": self._hit_count,
            "miss_count": self._miss_count,
            "hit_rate": round(hit_rate, 3),
            "total_requests": total_requests,
        }


class TrendAggregator:
    """Builds trends by running one neighborhood size query per event date.

    Args:
        neighborhood_size: Callable (seed_id, date) -> size of the unbounded
            neighborhood of the seed on that date
        cache: Cache that receives every computed sample
    """

    def __init__(self, neighborhood_size: Callable[[str, date], int], cache: TrendCache):
        self._neighborhood_size = neighborhood_size
        self.cache = cache

    def trend(self, seed_id: str, event_dates: Iterable[date]) -> Trend:
        """Sample the seed's neighborhood size at every given date."""
        computed = 0
        for when in sorted(set(event_dates)):
            if self.cache.get(seed_id, when) is not None:
                continue
            self.cache.record(seed_id, when, self._neighborhood_size(seed_id, when))
            computed += 1

        series = self.cache.series(seed_id)
        logger.info(f"Trend for {seed_id}: {len(series)} dates ({computed} newly computed)")
        return Trend(status=NetworkStatus.SUCCESS, seed_id=seed_id, series=series)
