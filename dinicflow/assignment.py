"""Two-sided capacitated assignment via max flow.

Left entities (for example teaching assistants) can each take up to their
capacity of right entities (for example course sections); each right entity
needs up to its requirement of left entities; a left/right pair can be
matched at most once and only if it is eligible. The largest number of
matches is the max flow of the network

    source -> left_i      capacity = left_capacities[i]
    left_i -> right_j     capacity = 1 for each eligible (i, j)
    right_j -> sink       capacity = right_requirements[j]

This module only uses the public network and max-flow operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from dinicflow.lib.algorithms.max_flow import calc_max_flow
from dinicflow.lib.graph import EdgeID, NodeID, ResidualNetwork
from dinicflow.logging import get_logger

logger = get_logger(__name__)

Pair = Tuple[int, int]


@dataclass
class AssignmentProblem:
    """Capacities, requirements and eligible pairs of an assignment instance.

    Attributes:
        left_capacities: Maximum matches per left entity.
        right_requirements: Matches wanted per right entity.
        eligible_pairs: ``(left_index, right_index)`` pairs allowed to match.
    """

    left_capacities: Sequence[int]
    right_requirements: Sequence[int]
    eligible_pairs: Sequence[Pair] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Check that eligible pairs are distinct and refer to existing entities."""
        num_left = len(self.left_capacities)
        num_right = len(self.right_requirements)
        seen = set()
        for left, right in self.eligible_pairs:
            if (left, right) in seen:
                raise ValueError(f"Eligible pair ({left}, {right}) is listed twice.")
            seen.add((left, right))
            if not 0 <= left < num_left:
                raise ValueError(
                    f"Eligible pair ({left}, {right}) has left index outside [0, {num_left})."
                )
            if not 0 <= right < num_right:
                raise ValueError(
                    f"Eligible pair ({left}, {right}) has right index outside [0, {num_right})."
                )

    @property
    def num_left(self) -> int:
        return len(self.left_capacities)

    @property
    def num_right(self) -> int:
        return len(self.right_requirements)


@dataclass
class AssignmentNetwork:
    """Flow network built for an AssignmentProblem.

    Attributes:
        network: The residual network.
        num_left: Number of left entities.
        source: Source node (always 0).
        sink: Sink node (always ``num_left + num_right + 1``).
        pair_edges: ``(pair, edge_id)`` for every eligible pair, in input order.
    """

    network: ResidualNetwork
    num_left: int
    source: NodeID
    sink: NodeID
    pair_edges: List[Tuple[Pair, EdgeID]] = field(default_factory=list)

    def left_node(self, left: int) -> NodeID:
        return 1 + left

    def right_node(self, right: int) -> NodeID:
        return 1 + self.num_left + right


@dataclass(frozen=True)
class AssignmentResult:
    """Solution of an AssignmentProblem.

    Attributes:
        total: Number of matches made (the max-flow value).
        assignments: Matched ``(left_index, right_index)`` pairs in input order.
    """

    total: int
    assignments: List[Pair]


def build_assignment_network(problem: AssignmentProblem) -> AssignmentNetwork:
    """Build the flow network for ``problem``.

    Node layout: source ``0``, left nodes ``1..L``, right nodes
    ``L+1..L+R``, sink ``L+R+1``. Source edges are added first, then sink
    edges, then pair edges, which fixes the search order and therefore
    which of several optimal assignments is found.

    Raises:
        NegativeCapacityError: If a capacity or requirement is negative.
    """
    sink = problem.num_left + problem.num_right + 1
    built = AssignmentNetwork(
        network=ResidualNetwork(sink + 1),
        num_left=problem.num_left,
        source=0,
        sink=sink,
    )
    network = built.network

    for i, cap in enumerate(problem.left_capacities):
        network.add_edge(built.source, built.left_node(i), cap)
    for j, req in enumerate(problem.right_requirements):
        network.add_edge(built.right_node(j), built.sink, req)
    for left, right in problem.eligible_pairs:
        edge_id = network.add_edge(built.left_node(left), built.right_node(right), 1)
        built.pair_edges.append(((left, right), edge_id))

    return built


def solve_assignment(problem: AssignmentProblem) -> AssignmentResult:
    """Compute a maximum assignment for ``problem``.

    Returns:
        AssignmentResult with the match count and the matched pairs.
    """
    built = build_assignment_network(problem)
    total = calc_max_flow(built.network, built.source, built.sink)
    assignments = [
        pair for pair, edge_id in built.pair_edges if built.network.edge_flow(edge_id) > 0
    ]
    logger.debug(
        "Assignment: %d left, %d right, %d eligible pairs -> %d matches",
        problem.num_left,
        problem.num_right,
        len(problem.eligible_pairs),
        total,
    )
    return AssignmentResult(total=total, assignments=assignments)
