"""Types and data structures for max-flow analytics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set

from dinicflow.lib.graph import EdgeID, NodeID

#: Level value of a node not reached by the current breadth-first pass.
UNVISITED = -1


@dataclass(frozen=True)
class PhaseStats:
    """Outcome of one Dinic phase (one level graph and its blocking flow).

    Attributes:
        phase: 1-based phase number.
        flow: Flow added during this phase.
        augmentations: Number of augmenting paths applied during this phase.
        sink_level: Distance of the sink in this phase's level graph.
    """

    phase: int
    flow: int
    augmentations: int
    sink_level: int


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation derived from the final residual state.

    Attributes:
        total_flow: The maximum flow value achieved.
        edge_flow: Flow on each forward edge, indexed by edge id.
        residual_cap: Remaining capacity on each forward edge, indexed by edge id.
        reachable: Nodes reachable from the source in the residual graph.
        min_cut: Forward edge ids crossing from ``reachable`` to the rest.
        phases: Number of phases that placed flow.
        augmentations: Total number of augmenting paths applied.
    """

    total_flow: int
    edge_flow: Dict[EdgeID, int]
    residual_cap: Dict[EdgeID, int]
    reachable: Set[NodeID]
    min_cut: List[EdgeID]
    phases: int
    augmentations: int
