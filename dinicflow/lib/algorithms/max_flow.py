from __future__ import annotations

from typing import Iterator, List, Literal, Optional, Set, Tuple, Union, overload

from dinicflow.config import FLOW_CONFIG
from dinicflow.exceptions import SourceEqualsSinkError
from dinicflow.lib.algorithms.bfs import bfs_levels
from dinicflow.lib.algorithms.blocking_flow import augment
from dinicflow.lib.algorithms.types import UNVISITED, FlowSummary, PhaseStats
from dinicflow.lib.graph import EdgeID, NodeID, ResidualNetwork
from dinicflow.logging import get_logger

logger = get_logger(__name__)


def _validate_terminals(
    network: ResidualNetwork, src_node: NodeID, dst_node: NodeID
) -> None:
    network.check_node(src_node)
    network.check_node(dst_node)
    if src_node == dst_node:
        raise SourceEqualsSinkError(src_node)


def iter_phases(
    network: ResidualNetwork, src_node: NodeID, dst_node: NodeID
) -> Iterator[PhaseStats]:
    """Run Dinic's algorithm one phase at a time.

    Each phase layers the residual network from ``src_node`` and then pushes
    augmenting paths through that level graph until none is left (a blocking
    flow). The generator yields after every phase and stops once
    ``dst_node`` is no longer reachable. Stopping iteration early leaves a
    valid flow on the network; phase boundaries are the only points where
    that holds, since a single augmentation is applied atomically.

    Args:
        network: The residual network, mutated in place.
        src_node: Source node.
        dst_node: Sink node.

    Yields:
        PhaseStats: Flow and augmentation count of the phase just completed.

    Raises:
        NodeIndexOutOfRangeError: If a terminal is out of range.
        SourceEqualsSinkError: If ``src_node == dst_node``.
    """
    # Validate eagerly, not on the first next().
    _validate_terminals(network, src_node, dst_node)
    return _run_phases(network, src_node, dst_node)


def _run_phases(
    network: ResidualNetwork, src_node: NodeID, dst_node: NodeID
) -> Iterator[PhaseStats]:
    n = network.num_nodes()
    levels: List[int] = [UNVISITED] * n
    cursor: List[int] = [0] * n
    phase = 0

    while bfs_levels(network, src_node, dst_node, levels):
        phase += 1
        for i in range(n):
            cursor[i] = 0

        phase_flow = 0
        augmentations = 0
        while True:
            pushed = augment(network, src_node, dst_node, levels, cursor)
            if pushed == 0:
                break
            phase_flow += pushed
            augmentations += 1

        stats = PhaseStats(
            phase=phase,
            flow=phase_flow,
            augmentations=augmentations,
            sink_level=levels[dst_node],
        )
        if FLOW_CONFIG.should_log_phase(phase):
            logger.debug(
                "Phase %d: sink level %d, %d augmentations, +%d flow",
                phase,
                stats.sink_level,
                augmentations,
                phase_flow,
            )
        yield stats


@overload
def calc_max_flow(
    network: ResidualNetwork,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    copy_graph: Optional[bool] = None,
    reset_flow_graph: bool = False,
) -> int: ...


@overload
def calc_max_flow(
    network: ResidualNetwork,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    copy_graph: Optional[bool] = None,
    reset_flow_graph: bool = False,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    network: ResidualNetwork,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    copy_graph: Optional[bool] = None,
    reset_flow_graph: bool = False,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from ``src_node`` to ``dst_node`` with Dinic's algorithm.

    The function:
      1. Validates both terminals before touching the network.
      2. Optionally copies and/or resets the network.
      3. Runs phases (``iter_phases``) until the sink is unreachable and sums
         the flow they place.

    By default the network is mutated in place, so calling this twice on the
    same instance returns the additional flow of the second run (0 once the
    first run reached the maximum). Pass ``copy_graph=True`` or
    ``reset_flow_graph=True`` for independent results.

    Args:
        network (ResidualNetwork):
            The network holding capacities; flow is expressed as reduced residuals.
        src_node (NodeID):
            The source node.
        dst_node (NodeID):
            The sink node.
        return_summary (bool):
            If True, also return a FlowSummary with edge flows and a minimum cut.
            Edge flows cover everything placed on the network, earlier runs included.
        copy_graph (Optional[bool]):
            If True, work on a copy so ``network`` stays unmodified. None uses
            ``FLOW_CONFIG.copy_graph``.
        reset_flow_graph (bool):
            If True, restore original capacities before computing.

    Returns:
        Union[int, Tuple[int, FlowSummary]]:
            - If not return_summary: int (total flow)
            - If return_summary: tuple[int, FlowSummary]

    Raises:
        NodeIndexOutOfRangeError: If a terminal is out of range.
        SourceEqualsSinkError: If ``src_node == dst_node``.

    Examples:
        >>> net = ResidualNetwork(4)
        >>> net.add_edge(0, 1, 3)
        0
        >>> net.add_edge(1, 3, 2)
        1
        >>> calc_max_flow(net, 0, 3)
        2
    """
    _validate_terminals(network, src_node, dst_node)

    if copy_graph is None:
        copy_graph = FLOW_CONFIG.copy_graph
    flow_graph = network.copy() if copy_graph else network
    if reset_flow_graph:
        flow_graph.reset()

    total_flow = 0
    phases = 0
    augmentations = 0
    for stats in iter_phases(flow_graph, src_node, dst_node):
        total_flow += stats.flow
        phases += 1
        augmentations += stats.augmentations

    logger.debug(
        "Max flow %d -> %d: %d after %d phases (%d augmentations)",
        src_node,
        dst_node,
        total_flow,
        phases,
        augmentations,
    )

    if not return_summary:
        return total_flow

    summary = _build_flow_summary(
        total_flow, flow_graph, src_node, phases, augmentations
    )
    return total_flow, summary


def residual_reachable(network: ResidualNetwork, src_node: NodeID) -> Set[NodeID]:
    """Return the nodes reachable from ``src_node`` over positive-residual arcs."""
    network.check_node(src_node)
    G = network.graph
    reachable = {src_node}
    stack = [src_node]
    while stack:
        node = stack.pop()
        for edge in G[node]:
            if edge.cap > 0 and edge.to not in reachable:
                reachable.add(edge.to)
                stack.append(edge.to)
    return reachable


def min_cut(network: ResidualNetwork, src_node: NodeID) -> List[EdgeID]:
    """Return forward edge ids leaving the residual-reachable side of ``src_node``.

    After a completed max-flow run these edges are saturated and their
    original capacities sum to the flow value.
    """
    return _cut_edges(network, residual_reachable(network, src_node))


def _cut_edges(network: ResidualNetwork, reachable: Set[NodeID]) -> List[EdgeID]:
    return [
        edge_id
        for edge_id, u, v, orig, _ in network.iter_edges()
        if u in reachable and v not in reachable and orig > 0
    ]


def _build_flow_summary(
    total_flow: int,
    flow_graph: ResidualNetwork,
    src_node: NodeID,
    phases: int,
    augmentations: int,
) -> FlowSummary:
    """Build a FlowSummary from the flow graph state."""
    edge_flow = {}
    residual_cap = {}
    for edge_id, _, _, orig, residual in flow_graph.iter_edges():
        edge_flow[edge_id] = orig - residual
        residual_cap[edge_id] = residual

    reachable = residual_reachable(flow_graph, src_node)

    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=_cut_edges(flow_graph, reachable),
        phases=phases,
        augmentations=augmentations,
    )


def saturated_edges(
    network: ResidualNetwork, src_node: NodeID, dst_node: NodeID
) -> List[EdgeID]:
    """Identify forward edges left with zero residual capacity by a max flow.

    The computation runs on a copy; ``network`` is not modified. Edges with
    zero original capacity are not reported.

    Args:
        network: The network to analyze.
        src_node: Source node.
        dst_node: Sink node.

    Returns:
        List of saturated edge ids in insertion order.
    """
    _, summary = calc_max_flow(
        network, src_node, dst_node, return_summary=True, copy_graph=True
    )
    return [
        edge_id
        for edge_id, residual in summary.residual_cap.items()
        if residual == 0 and network.original_capacity(edge_id) > 0
    ]
