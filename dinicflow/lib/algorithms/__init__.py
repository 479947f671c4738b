"""Dinic max-flow building blocks: level builder, blocking-flow search, orchestrator."""

from dinicflow.lib.algorithms.bfs import bfs_levels
from dinicflow.lib.algorithms.blocking_flow import augment
from dinicflow.lib.algorithms.max_flow import (
    calc_max_flow,
    iter_phases,
    min_cut,
    residual_reachable,
    saturated_edges,
)
from dinicflow.lib.algorithms.types import UNVISITED, FlowSummary, PhaseStats

__all__ = [
    "UNVISITED",
    "FlowSummary",
    "PhaseStats",
    "augment",
    "bfs_levels",
    "calc_max_flow",
    "iter_phases",
    "min_cut",
    "residual_reachable",
    "saturated_edges",
]
