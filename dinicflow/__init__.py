"""dinicflow: maximum flow over integer-capacity networks with Dinic's algorithm.

Primary API:
    ResidualNetwork - Residual graph with paired forward/reverse arcs
    calc_max_flow() - Max flow between two nodes (optionally with a FlowSummary)
    iter_phases() - Phase-by-phase execution with cooperative checkpoints
    solve_assignment() - Two-sided capacitated assignment via max flow
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from dinicflow import ResidualNetwork, calc_max_flow

    net = ResidualNetwork(4)
    net.add_edge(0, 1, 3)
    net.add_edge(0, 2, 2)
    net.add_edge(1, 3, 2)
    net.add_edge(2, 3, 3)
    net.add_edge(1, 2, 1)

    flow = calc_max_flow(net, 0, 3)  # 5
"""

from __future__ import annotations

from dinicflow import logging
from dinicflow._version import __version__
from dinicflow.assignment import (
    AssignmentProblem,
    AssignmentResult,
    build_assignment_network,
    solve_assignment,
)
from dinicflow.config import FLOW_CONFIG, MaxFlowConfig
from dinicflow.exceptions import (
    FlowError,
    NegativeCapacityError,
    NodeIndexOutOfRangeError,
    SourceEqualsSinkError,
)
from dinicflow.lib.algorithms.max_flow import (
    calc_max_flow,
    iter_phases,
    min_cut,
    saturated_edges,
)
from dinicflow.lib.algorithms.types import FlowSummary, PhaseStats
from dinicflow.lib.graph import ResidualNetwork
from dinicflow.lib.nx import EdgeMap, NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graph
    "ResidualNetwork",
    # Max flow
    "calc_max_flow",
    "iter_phases",
    "min_cut",
    "saturated_edges",
    "FlowSummary",
    "PhaseStats",
    # Assignment
    "AssignmentProblem",
    "AssignmentResult",
    "build_assignment_network",
    "solve_assignment",
    # Errors
    "FlowError",
    "NegativeCapacityError",
    "NodeIndexOutOfRangeError",
    "SourceEqualsSinkError",
    # Configuration
    "FLOW_CONFIG",
    "MaxFlowConfig",
    # Library integrations (NetworkX)
    "EdgeMap",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
