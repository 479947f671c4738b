from __future__ import annotations

from collections import deque
from typing import List

from dinicflow.lib.algorithms.types import UNVISITED
from dinicflow.lib.graph import NodeID, ResidualNetwork


def bfs_levels(
    network: ResidualNetwork,
    src_node: NodeID,
    dst_node: NodeID,
    levels: List[int],
) -> bool:
    """
    Breadth-first layering over arcs with positive residual capacity.

    ``levels`` is reset to ``UNVISITED`` and refilled in place with each
    node's distance from ``src_node``. The whole reachable part of the
    network is layered; ``dst_node`` is only used for the return value.

    Args:
        network: The residual network.
        src_node: Node to start from (level 0).
        dst_node: Node whose reachability is reported.
        levels: One slot per node, overwritten.

    Returns:
        bool: True if ``dst_node`` received a level.
    """
    G = network.graph
    for i in range(len(levels)):
        levels[i] = UNVISITED
    levels[src_node] = 0
    queue = deque([src_node])
    while queue:
        node = queue.popleft()
        next_level = levels[node] + 1
        for edge in G[node]:
            if edge.cap > 0 and levels[edge.to] == UNVISITED:
                levels[edge.to] = next_level
                queue.append(edge.to)
    return levels[dst_node] != UNVISITED
