from __future__ import annotations

from typing import List

from dinicflow.lib.graph import NodeID, ResidualNetwork


def augment(
    network: ResidualNetwork,
    src_node: NodeID,
    dst_node: NodeID,
    levels: List[int],
    cursor: List[int],
) -> int:
    """
    Find one augmenting path in the level graph and push its bottleneck.

    The search walks only arcs ``u -> v`` with positive residual capacity and
    ``levels[v] == levels[u] + 1``, starting each node at ``cursor[u]``. When a
    node runs out of usable arcs it is popped and its parent's cursor moves
    past the arc that led to it, so within one phase no arc is tried again
    after it has been shown not to reach the sink. Cursors are never moved
    backwards; callers reset them between phases.

    Capacities are only touched once a complete path is known, so either the
    whole path is applied or nothing changes.

    The walk keeps its own stack instead of recursing; its depth is bounded by
    the sink's level, not by the interpreter's recursion limit.

    Args:
        network: The residual network, mutated in place on success.
        src_node: Source node.
        dst_node: Sink node.
        levels: Level array from the current phase's ``bfs_levels`` call.
        cursor: Per-node current-arc positions shared across calls in a phase.

    Returns:
        int: The bottleneck pushed, or 0 if no path remains.
    """
    G = network.graph
    # path[i] is the arc index taken out of nodes[i]; nodes[-1] is the frontier.
    nodes: List[NodeID] = [src_node]
    path: List[int] = []

    while nodes:
        node = nodes[-1]
        if node == dst_node:
            return _apply_path(G, nodes, path)

        edges = G[node]
        next_level = levels[node] + 1
        i = cursor[node]
        while i < len(edges):
            edge = edges[i]
            if edge.cap > 0 and levels[edge.to] == next_level:
                break
            i += 1
        cursor[node] = i

        if i < len(edges):
            nodes.append(edges[i].to)
            path.append(i)
            continue

        # Dead end: retreat and retire the arc that led here.
        nodes.pop()
        if path:
            path.pop()
            cursor[nodes[-1]] += 1

    return 0


def _apply_path(G, nodes: List[NodeID], path: List[int]) -> int:
    """Push the path's bottleneck along it and return the amount pushed."""
    bottleneck = min(G[u][i].cap for u, i in zip(nodes, path))
    for u, i in zip(nodes, path):
        edge = G[u][i]
        edge.cap -= bottleneck
        G[edge.to][edge.rev].cap += bottleneck
    return bottleneck
