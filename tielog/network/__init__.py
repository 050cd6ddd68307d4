"""Link index, neighborhood traversal and trend aggregation"""

from __future__ import annotations

from .link_index import LinkIndex, pair_key
from .registry import SocialNetwork
from .traversal import Neighborhood, expand_neighborhood
from .trend import Trend, TrendAggregator, TrendCache

__all__ = [
    "LinkIndex",
    "Neighborhood",
    "SocialNetwork",
    "Trend",
    "TrendAggregator",
    "TrendCache",
    "expand_neighborhood",
    "pair_key",
]
