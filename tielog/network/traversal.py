"""Breadth-first neighborhood expansion over links active on a date.

The traversal works on a snapshot of the link keys taken when it starts.
Each link is consumed the first time one of its endpoints is expanded, and
layers are processed strictly in distance order, so the first distance
recorded for a participant is its shortest hop count.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date

from ..logging_config import TRACE
from ..models import Friend, Participant
from ..status import NetworkStatus
from .link_index import LinkIndex, PairKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Neighborhood:
    """Result of a neighborhood query for one (seed, date, max distance)"""

    status: NetworkStatus
    seed_id: str
    query_date: date
    max_distance: int
    friends: frozenset[Friend] = field(default_factory=frozenset)

    def distances(self) -> dict[str, int]:
        """Participant id -> hop distance, nearest first."""
        ordered = sorted(self.friends, key=lambda f: (f.distance, f.id))
        return {friend.id: friend.distance for friend in ordered}

    def at_distance(self, distance: int) -> set[str]:
        return {friend.id for friend in self.friends if friend.distance == distance}

    def __len__(self) -> int:
        return len(self.friends)

    def __contains__(self, participant_id: object) -> bool:
        return any(friend.id == participant_id for friend in self.friends)


def expand_neighborhood(
    index: LinkIndex,
    seed: Participant,
    when: date,
    max_distance: int,
) -> frozenset[Friend]:
    """Collect every participant reachable from seed within max_distance hops.

    Only links active on `when` are followed. The seed is always included
    at distance 0. Callers validate the seed and the distance bound.
    """
    remaining = index.keys()
    incident: dict[str, list[PairKey]] = defaultdict(list)
    for key in remaining:
        for participant_id in key:
            incident[participant_id].append(key)

    consumed: set[PairKey] = set()
    found: dict[Participant, int] = {seed: 0}
    frontier = [seed]
    distance = 1

    while frontier and distance <= max_distance and len(consumed) < len(remaining):
        next_frontier: list[Participant] = []

        for member in frontier:
            for key in incident.get(str(member.id), ()):
                if key in consumed:
                    continue
                consumed.add(key)

                link = index.link_for(key)
                assert link is not None and link.is_valid, f"Index holds no usable link for {sorted(key)}"
                if not link.is_active(when):
                    continue

                neighbor = link.other(member)
                if neighbor in found:
                    continue
                found[neighbor] = distance
                next_frontier.append(neighbor)

        logger.log(
            TRACE,
            f"Layer {distance} from {seed}: {len(next_frontier)} new, {len(consumed)}/{len(remaining)} links consumed"
        )
        frontier = next_frontier
        distance += 1

    return frozenset(Friend(participant, hops) for participant, hops in found.items())


def invalid_neighborhood(status: NetworkStatus, seed_id: str, when: date, max_distance: int) -> Neighborhood:
    """Empty result for a rejected query."""
    return Neighborhood(status=status, seed_id=seed_id, query_date=when, max_distance=max_distance)
