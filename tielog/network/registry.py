"""Social network registry.

Owns the participants, the link index and the trend cache, and exposes the
pair-level operations (establish, tear down, activity) together with the
neighborhood and trend queries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

import networkx as nx

from ..dates import as_date
from ..errors import require, require_ids
from ..graph.snapshot import build_active_graph, graph_metrics
from ..link import Link
from ..models import Participant
from ..settings import Settings, get_settings
from ..status import NetworkStatus
from .link_index import LinkIndex
from .traversal import Neighborhood, expand_neighborhood, invalid_neighborhood
from .trend import Trend, TrendAggregator, TrendCache

logger = logging.getLogger(__name__)


class SocialNetwork:
    """In-memory social network of participants and temporal links.

    Usage:
        network = SocialNetwork()
        network.add_user(Participant.with_id("ada"))
        network.add_user(Participant.with_id("grace"))
        network.establish_link({"ada", "grace"}, date(2014, 1, 1))
        network.neighborhood("ada", date(2014, 2, 1)).distances()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        trend_cache: TrendCache | None = None,
    ):
        """Initialize an empty network.

        Args:
            settings: Settings to use (defaults to get_settings())
            trend_cache: Cache for trend samples (defaults to a fresh cache)
        """
        self.settings = settings or get_settings()
        self.index = LinkIndex()
        self._users: dict[str, Participant] = {}
        self.trend_cache = trend_cache if trend_cache is not None else TrendCache()
        self._trends = TrendAggregator(self._neighborhood_size, self.trend_cache)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @property
    def users(self) -> frozenset[Participant]:
        return frozenset(self._users.values())

    def add_user(self, user: Participant) -> bool:
        """Register a participant.

        Returns:
            True if added, False if the participant is uninitialized or a
            participant with the same id is already a member
        """
        require(user=user)
        if not user.is_valid or user.id in self._users:
            return False
        self._users[user.id] = user  # type: ignore[index]
        logger.debug(f"Added user {user.id}")
        return True

    def is_member(self, user_id: str) -> bool:
        require(user_id=user_id)
        return user_id in self._users

    def get_user(self, user_id: str) -> Participant | None:
        require(user_id=user_id)
        return self._users.get(user_id)

    def _resolve_pair(self, ids: Iterable[str]) -> frozenset[Participant] | None:
        """Map a collection of ids to exactly two distinct members."""
        id_list = list(ids)
        users = {self._users[i] for i in id_list if i in self._users}
        if len(id_list) != 2 or len(users) != 2:
            return None
        return frozenset(users)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def link_for(self, ids: Iterable[str]) -> Link | None:
        return self.index.link_for(require_ids(ids))

    def all_event_dates(self) -> frozenset[date]:
        return self.index.all_event_dates()

    def establish_link(self, ids: Iterable[str], when: date) -> NetworkStatus:
        """Establish the link between two member ids at the given date.

        A pair without a link gets a new one. A pair that already has a link
        is handed to that link, so an active link reports ALREADY_ACTIVE and
        a torn-down link can be established again.
        """
        return self._change_link(ids, when, establishing=True)

    def tear_down_link(self, ids: Iterable[str], when: date) -> NetworkStatus:
        """Tear down the link between two member ids at the given date."""
        return self._change_link(ids, when, establishing=False)

    def is_active(self, ids: Iterable[str], when: date) -> bool:
        """Whether the two ids share a link that is active on the given date."""
        ids = require_ids(ids)
        require(when=when)
        pair = self._resolve_pair(ids)
        if pair is None:
            return False
        link = self.index.link_for(pair)
        return link is not None and link.is_active(when)

    def _change_link(self, ids: Iterable[str], when: date, establishing: bool) -> NetworkStatus:
        ids = require_ids(ids)
        require(when=when)
        when = as_date(when)

        pair = self._resolve_pair(ids)
        if pair is None:
            logger.debug(f"Rejected link change for {sorted(ids)}: not two distinct members")
            return NetworkStatus.INVALID_USERS

        link = self.index.link_for(pair)
        if link is None:
            if not establishing:
                return NetworkStatus.INVALID_USERS
            link = self.index.create_link(pair)
            status = link.set_participants(pair, strict=self.settings.strict_participants)
            assert status is NetworkStatus.SUCCESS, f"Fresh link rejected {sorted(map(str, pair))}: {status}"

        status = link.establish(when) if establishing else link.tear_down(when)
        if status.ok:
            self.index.record_event_date(when)
            logger.info(f"{'Established' if establishing else 'Tore down'} {link!r} at {when}")
        return status

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighborhood(self, user_id: str, when: date, max_distance: int | None = None) -> Neighborhood:
        """All participants reachable from a member through links active on a date.

        Args:
            user_id: Seed member id
            when: Query date
            max_distance: Maximum hop count (defaults to the number of links)

        Returns:
            Neighborhood with status SUCCESS, INVALID_USERS for an unknown
            seed, or INVALID_DISTANCE for a negative bound
        """
        require(user_id=user_id, when=when)
        when = as_date(when)
        if max_distance is None:
            max_distance = len(self.index)

        seed = self._users.get(user_id)
        if seed is None:
            return invalid_neighborhood(NetworkStatus.INVALID_USERS, user_id, when, max_distance)
        if max_distance < 0:
            return invalid_neighborhood(NetworkStatus.INVALID_DISTANCE, user_id, when, max_distance)

        friends = expand_neighborhood(self.index, seed, when, max_distance)
        logger.debug(f"Neighborhood of {user_id} at {when} (max {max_distance}): {len(friends)} participants")
        return Neighborhood(
            status=NetworkStatus.SUCCESS,
            seed_id=user_id,
            query_date=when,
            max_distance=max_distance,
            friends=friends,
        )

    def neighborhood_trend(self, user_id: str) -> Trend:
        """Neighborhood size of a member at every date any link changed state."""
        require(user_id=user_id)
        if user_id not in self._users:
            return Trend(status=NetworkStatus.INVALID_USERS, seed_id=user_id)
        return self._trends.trend(user_id, self.index.all_event_dates())

    def _neighborhood_size(self, user_id: str, when: date) -> int:
        return len(self.neighborhood(user_id, when))

    def active_graph(self, when: date) -> nx.Graph:
        """NetworkX snapshot of all members and the links active on a date."""
        require(when=when)
        return build_active_graph(self.index, as_date(when), self._users.values())

    def graph_metrics(self, when: date) -> dict[str, Any]:
        return graph_metrics(self.active_graph(when))
