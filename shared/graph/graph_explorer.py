"""Exploration helpers over the entity-relationship graph.

Layout and rendering belong to the frontend's force-directed renderer; these
functions only answer the questions the graph sidebar asks.
"""

from collections import Counter
from collections.abc import Iterable

from shared.models.graph import GraphData, GraphNode, NODE_GROUPS, RankedNode

MIN_SUGGESTION_QUERY = 2


def neighbor_ids(graph: GraphData, node_id: str) -> set[str]:
    """Return the node itself plus every node linked to it in either direction."""
    neighbors = {node_id}
    for link in graph.links:
        if link.source == node_id:
            neighbors.add(link.target)
        if link.target == node_id:
            neighbors.add(link.source)
    return neighbors


def filter_by_groups(graph: GraphData, groups: Iterable[str]) -> GraphData:
    """Keep nodes of the enabled groups and the links whose both ends survive."""
    enabled = set(groups)
    nodes = [node for node in graph.nodes if node.group in enabled]
    visible = {node.id for node in nodes}
    links = [link for link in graph.links if link.source in visible and link.target in visible]
    return GraphData(nodes=nodes, links=links)


def top_connected(graph: GraphData, limit: int = 30) -> list[RankedNode]:
    """Nodes of the known groups ranked by their number of links, most connected first."""
    connections: Counter[str] = Counter()
    for link in graph.links:
        connections[link.source] += 1
        connections[link.target] += 1

    ranked = [
        RankedNode(**node.model_dump(), connections=connections[node.id])
        for node in graph.nodes
        if node.group in NODE_GROUPS
    ]
    ranked.sort(key=lambda node: node.connections, reverse=True)
    return ranked[:limit]


def suggest_nodes(
    graph: GraphData,
    query: str,
    groups: Iterable[str] = NODE_GROUPS,
    limit: int = 20,
) -> dict[str, list[GraphNode]]:
    """Search-as-you-type suggestions grouped by node group.

    Queries shorter than two characters return nothing. Matches are
    case-insensitive substrings of the node name, heaviest nodes first.
    """
    if len(query) < MIN_SUGGESTION_QUERY:
        return {}
    needle = query.lower()
    enabled = set(groups)
    matches = [node for node in graph.nodes if needle in node.name.lower() and node.group in enabled]
    matches.sort(key=lambda node: node.val, reverse=True)

    grouped: dict[str, list[GraphNode]] = {}
    for node in matches[:limit]:
        grouped.setdefault(node.group, []).append(node)
    return grouped


def connected_by_group(graph: GraphData, node_id: str) -> dict[str, list[GraphNode]]:
    """Neighbors of a node grouped by group, each group sorted by weight descending."""
    by_id = {node.id: node for node in graph.nodes}
    grouped: dict[str, list[GraphNode]] = {}
    for neighbor_id in neighbor_ids(graph, node_id):
        if neighbor_id == node_id or neighbor_id not in by_id:
            continue
        node = by_id[neighbor_id]
        grouped.setdefault(node.group, []).append(node)
    for nodes in grouped.values():
        nodes.sort(key=lambda node: (-node.val, node.name))
    return grouped
