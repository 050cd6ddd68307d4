"""
Point-in-time social graph snapshots using NetworkX.

A snapshot holds one node per participant and one edge per link that is
active on the snapshot date. Edge attributes carry the link's event
history so callers can inspect when the tie was formed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Any

import networkx as nx

from ..models import Participant

if TYPE_CHECKING:
    from ..network.link_index import LinkIndex

logger = logging.getLogger(__name__)


def build_active_graph(
    index: LinkIndex,
    when: date,
    participants: Iterable[Participant] | None = None,
) -> nx.Graph:
    """Build an undirected graph of the links active on a date.

    Args:
        index: Link index to read from
        when: Snapshot date
        participants: Extra participants to include as nodes even when
            they have no active link (e.g., every registered user)

    Returns:
        NetworkX graph keyed by participant id
    """
    G = nx.Graph()

    for participant in participants or ():
        if participant.is_valid:
            G.add_node(participant.id, participant=participant)

    for _, link in index.items():
        if not link.is_valid or not link.is_active(when):
            continue
        first, second = sorted(link.participants, key=str)
        for p in (first, second):
            if p.id not in G:
                G.add_node(p.id, participant=p)
        G.add_edge(
            first.id,
            second.id,
            first_event=link.first_event(),
            events=list(link.events),
        )

    logger.debug(f"Snapshot at {when}: {G.number_of_nodes()} nodes, {G.number_of_edges()} active links")
    return G


def graph_metrics(G: nx.Graph) -> dict[str, Any]:
    """Get overall graph metrics"""
    if G.number_of_nodes() == 0:
        return {
            "node_count": 0,
            "edge_count": 0,
            "density": 0.0,
            "average_clustering": 0.0,
            "connected_components": 0,
            "largest_component_size": 0,
            "average_degree": 0.0,
        }

    components = list(nx.connected_components(G))
    n = G.number_of_nodes()

    return {
        "node_count": n,
        "edge_count": G.number_of_edges(),
        "density": nx.density(G),
        "average_clustering": nx.average_clustering(G),
        "connected_components": len(components),
        "largest_component_size": len(max(components, key=len)),
        "average_degree": sum(dict(G.degree()).values()) / n,
    }
