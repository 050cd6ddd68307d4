"""Pair-to-link association owned by the social network registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from ..errors import InvalidArgumentError
from ..link import Link
from ..models import Participant

logger = logging.getLogger(__name__)

PairKey = frozenset[str]


def pair_key(participants: Iterable[Participant | str]) -> PairKey:
    """Build the unordered key for a pair of participants or participant ids."""
    if isinstance(participants, str):
        raise InvalidArgumentError(f"Expected a pair of participants or ids, got the string {participants!r}")
    return frozenset(p if isinstance(p, str) else str(p.id) for p in participants)


class LinkIndex:
    """Unordered participant pair -> Link, plus every date a link changed state.

    There is at most one Link per pair. Links are never removed; tearing a
    link down is an event on the Link, not a removal from the index.
    """

    def __init__(self) -> None:
        self._links: dict[PairKey, Link] = {}
        self._event_dates: set[date] = set()

    def link_for(self, pair: Iterable[Participant | str]) -> Link | None:
        return self._links.get(pair_key(pair))

    def contains(self, pair: Iterable[Participant | str]) -> bool:
        return pair_key(pair) in self._links

    def create_link(self, pair: Iterable[Participant | str]) -> Link:
        """Insert a fresh, uninitialized Link for the pair and return it."""
        key = pair_key(pair)
        if key in self._links:
            raise ValueError(f"A link already exists for {sorted(key)}")
        link = Link()
        self._links[key] = link
        logger.debug(f"Created link slot for {sorted(key)}")
        return link

    def record_event_date(self, when: date) -> None:
        self._event_dates.add(when)

    def all_event_dates(self) -> frozenset[date]:
        return frozenset(self._event_dates)

    def keys(self) -> frozenset[PairKey]:
        """Snapshot of the pair keys currently in the index."""
        return frozenset(self._links)

    def items(self) -> Iterator[tuple[PairKey, Link]]:
        return iter(list(self._links.items()))

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, pair: object) -> bool:
        if isinstance(pair, (set, frozenset, tuple, list)):
            return self.contains(pair)
        return False
