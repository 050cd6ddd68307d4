"""tielog - temporal social links with neighborhood and trend queries.

The library only emits records through module loggers. Applications call
configure_logging() once at startup to install the ISO8601 handler:

    from tielog import configure_logging, get_logger

    configure_logging(source="app")
    logger = get_logger(__name__)
"""

from __future__ import annotations

from .errors import InvalidArgumentError, MissingArgumentError, TielogError, UninitializedObjectError
from .link import Link
from .logging_config import configure_logging, get_logger
from .models import Friend, Participant
from .network import LinkIndex, Neighborhood, SocialNetwork, Trend, TrendAggregator, TrendCache
from .status import NetworkStatus

__all__ = [
    "Friend",
    "configure_logging",
    "get_logger",
    "InvalidArgumentError",
    "Link",
    "LinkIndex",
    "MissingArgumentError",
    "Neighborhood",
    "NetworkStatus",
    "Participant",
    "SocialNetwork",
    "TielogError",
    "Trend",
    "TrendAggregator",
    "TrendCache",
    "UninitializedObjectError",
]
