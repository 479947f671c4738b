"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and the integer-indexed
``ResidualNetwork`` used by the max-flow algorithms.

Example:
    >>> import networkx as nx
    >>> from dinicflow.lib.nx import from_networkx, to_networkx
    >>> from dinicflow.lib.algorithms.max_flow import calc_max_flow
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=100)
    >>> G.add_edge("B", "C", capacity=50)
    >>>
    >>> network, node_map, edge_map = from_networkx(G)
    >>> calc_max_flow(network, node_map.to_index["A"], node_map.to_index["C"])
    50
    >>>
    >>> # Flow per original edge
    >>> G_out = to_networkx(network, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from dinicflow.config import FLOW_CONFIG
from dinicflow.lib.graph import ResidualNetwork

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


# Type alias for edge references: (source_node, target_node, edge_key)
EdgeRef = Tuple[Hashable, Hashable, Any]


@dataclass
class EdgeMap:
    """Bidirectional mapping between edge ids and original edge references.

    Attributes:
        to_ref: Maps an edge id returned by ``add_edge`` to the original
            (source, target, key) tuple
        from_ref: Maps (source, target, key) to its list of edge ids
            (two ids per edge when converting with bidirectional=True)
    """

    to_ref: Dict[int, EdgeRef] = field(default_factory=dict)
    from_ref: Dict[EdgeRef, List[int]] = field(default_factory=dict)

    def __len__(self) -> int:
        """Return the number of edge mappings."""
        return len(self.to_ref)


def _as_capacity(value: Any, edge_ref: EdgeRef) -> int:
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real) and float(value).is_integer():
        return int(value)
    raise TypeError(f"Edge {edge_ref} has non-integral capacity {value!r}.")


def from_networkx(
    G: NxGraph,
    *,
    capacity_attr: Optional[str] = None,
    default_capacity: Optional[int] = None,
    bidirectional: bool = False,
) -> Tuple[ResidualNetwork, NodeMap, EdgeMap]:
    """Convert a NetworkX graph to a ResidualNetwork.

    Node names are sorted by ``str`` and mapped to indices ``0..n-1``, and
    edges are inserted in NetworkX iteration order, so the same graph always
    produces the same network (and the same max-flow run).

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        capacity_attr: Edge attribute holding capacity.
            None uses ``FLOW_CONFIG.capacity_attr``.
        default_capacity: Capacity when the attribute is missing.
            None uses ``FLOW_CONFIG.default_capacity``.
        bidirectional: If True, add a reverse edge for each edge. Undirected
            graphs should usually be converted this way.

    Returns:
        Tuple of (network, node_map, edge_map).

    Raises:
        TypeError: If G is not a NetworkX graph or a capacity is not integral.
        ValueError: If graph has no nodes.
        NegativeCapacityError: If a capacity is negative.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    if capacity_attr is None:
        capacity_attr = FLOW_CONFIG.capacity_attr
    if default_capacity is None:
        default_capacity = FLOW_CONFIG.default_capacity

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)
    network = ResidualNetwork(len(node_names))
    edge_map = EdgeMap()

    if G.is_multigraph():
        edges_iter = G.edges(keys=True, data=True)
    else:
        edges_iter = ((u, v, 0, d) for u, v, d in G.edges(data=True))

    for u, v, key, data in edges_iter:
        src_idx = node_map.to_index[u]
        dst_idx = node_map.to_index[v]
        edge_ref: EdgeRef = (u, v, key)
        cap = _as_capacity(data.get(capacity_attr, default_capacity), edge_ref)

        edge_id = network.add_edge(src_idx, dst_idx, cap)
        edge_map.to_ref[edge_id] = edge_ref
        edge_map.from_ref.setdefault(edge_ref, []).append(edge_id)

        if bidirectional:
            # Reverse direction maps to the same original edge reference
            edge_id = network.add_edge(dst_idx, src_idx, cap)
            edge_map.to_ref[edge_id] = edge_ref
            edge_map.from_ref[edge_ref].append(edge_id)

    return network, node_map, edge_map


def to_networkx(
    network: ResidualNetwork,
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: Optional[str] = None,
    flow_attr: str = "flow",
) -> "nx.MultiDiGraph":
    """Convert a ResidualNetwork back to a NetworkX MultiDiGraph.

    Only forward edges are emitted (reverse arcs are bookkeeping). Each edge
    carries its original capacity and the flow currently on it; the edge key
    is the edge id, so results can be matched back to ``add_edge`` calls.

    Args:
        network: The network to convert
        node_map: Optional NodeMap to restore original node names.
            If None, nodes are labeled 0, 1, 2, ...
        capacity_attr: Edge attribute name for capacity.
            None uses ``FLOW_CONFIG.capacity_attr``.
        flow_attr: Edge attribute name for flow (default: "flow")

    Returns:
        nx.MultiDiGraph with one edge per forward edge of ``network``
    """
    import networkx as nx

    if capacity_attr is None:
        capacity_attr = FLOW_CONFIG.capacity_attr

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(idx) for idx in range(network.num_nodes()))

    for edge_id, u, v, orig, residual in network.iter_edges():
        G.add_edge(
            name(u),
            name(v),
            key=edge_id,
            **{capacity_attr: orig, flow_attr: orig - residual},
        )

    return G
