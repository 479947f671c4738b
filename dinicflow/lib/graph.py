from __future__ import annotations

from numbers import Integral
from pickle import dumps, loads
from typing import Iterator, List, Tuple

from dinicflow.exceptions import NegativeCapacityError, NodeIndexOutOfRangeError

NodeID = int
EdgeID = int
#: (edge_id, tail, head, original_capacity, residual_capacity)
EdgeTuple = Tuple[EdgeID, NodeID, NodeID, int, int]


class Edge:
    """
    One arc of the residual network.

    Attributes:
        to (NodeID): Head node of the arc.
        rev (int): Index of the paired arc inside ``graph[to]``.
        cap (int): Remaining (residual) capacity.
    """

    __slots__ = ("to", "rev", "cap")

    def __init__(self, to: NodeID, rev: int, cap: int) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap

    def __repr__(self) -> str:
        return f"Edge(to={self.to}, rev={self.rev}, cap={self.cap})"


class ResidualNetwork:
    """
    A directed, integer-capacity residual network with paired arcs.

    This class enforces:
      - A fixed node set ``[0, n)`` allocated up front.
      - Append-only construction: each ``add_edge`` appends a forward arc to
        the tail's list and a zero-capacity reverse arc to the head's list.
        Arc order and reverse indices never change afterwards.
      - Non-negative integral capacities; invalid input raises before any
        mutation.
      - Multi-edges and self-loops are allowed.

    Flow is computed by mutating residual capacities in place, so a second
    computation on the same instance continues from the reduced capacities.
    Use ``copy()`` or ``reset()`` for independent runs.
    """

    def __init__(self, num_nodes: int) -> None:
        """
        Initialize a ResidualNetwork with ``num_nodes`` nodes and no edges.

        Args:
            num_nodes (int): Number of nodes. Must be >= 0.

        Attributes:
            graph (List[List[Edge]]): Per-node outgoing arcs (forward and reverse).
            _fwd (List[Tuple[NodeID, int]]): Per edge id, the tail node and the
                position of the forward arc in ``graph[tail]``.
            _orig_cap (List[int]): Per edge id, the capacity given at insertion.

        Raises:
            TypeError: If ``num_nodes`` is not an integer.
            ValueError: If ``num_nodes`` is negative.
        """
        if not isinstance(num_nodes, Integral):
            raise TypeError(
                f"Number of nodes must be an integer, got {type(num_nodes).__name__}."
            )
        if num_nodes < 0:
            raise ValueError(f"Number of nodes must be non-negative, got {num_nodes}.")
        self._num_nodes = int(num_nodes)
        self.graph: List[List[Edge]] = [[] for _ in range(self._num_nodes)]
        self._fwd: List[Tuple[NodeID, int]] = []
        self._orig_cap: List[int] = []

    def __repr__(self) -> str:
        return (
            f"ResidualNetwork(num_nodes={self._num_nodes}, "
            f"num_edges={len(self._fwd)})"
        )

    def copy(self) -> ResidualNetwork:
        """
        Create an independent deep copy, current residual capacities included.

        Returns:
            ResidualNetwork: A new instance sharing no mutable state with this one.
        """
        return loads(dumps(self))

    #
    # Construction
    #
    def check_node(self, node: NodeID) -> None:
        """
        Validate a node index.

        Raises:
            NodeIndexOutOfRangeError: If ``node`` is not in ``[0, num_nodes)``.
        """
        if not 0 <= node < self._num_nodes:
            raise NodeIndexOutOfRangeError(node, self._num_nodes)

    def add_edge(self, u: NodeID, v: NodeID, capacity: int) -> EdgeID:
        """
        Add a directed edge ``u -> v`` together with its reverse arc.

        Args:
            u (NodeID): Tail node.
            v (NodeID): Head node.
            capacity (int): Non-negative integral capacity.

        Returns:
            EdgeID: Dense id of the new forward edge (0 for the first call, then 1, ...).

        Raises:
            TypeError: If ``capacity`` is not an integer.
            NegativeCapacityError: If ``capacity`` is negative.
            NodeIndexOutOfRangeError: If ``u`` or ``v`` is out of range.
        """
        if not isinstance(capacity, Integral):
            raise TypeError(
                f"Edge capacity must be an integer, got {type(capacity).__name__}."
            )
        if capacity < 0:
            raise NegativeCapacityError(capacity)
        self.check_node(u)
        self.check_node(v)

        capacity = int(capacity)
        u_edges = self.graph[u]
        v_edges = self.graph[v]
        fwd_pos = len(u_edges)
        # On a self-loop the forward arc lands in the same list first.
        rev_pos = len(v_edges) + (1 if u == v else 0)
        u_edges.append(Edge(v, rev_pos, capacity))
        v_edges.append(Edge(u, fwd_pos, 0))

        edge_id = len(self._fwd)
        self._fwd.append((u, fwd_pos))
        self._orig_cap.append(capacity)
        return edge_id

    def reset(self) -> None:
        """Restore every forward arc to its original capacity and every reverse arc to 0."""
        for (u, pos), cap in zip(self._fwd, self._orig_cap):
            edge = self.graph[u][pos]
            edge.cap = cap
            self.graph[edge.to][edge.rev].cap = 0

    #
    # Accessors
    #
    def num_nodes(self) -> int:
        """Return the number of nodes."""
        return self._num_nodes

    def num_edges(self) -> int:
        """Return the number of forward edges added with ``add_edge``."""
        return len(self._fwd)

    def edges(self, u: NodeID) -> List[Edge]:
        """
        Return the ordered outgoing arcs of ``u`` (forward and reverse).

        Raises:
            NodeIndexOutOfRangeError: If ``u`` is out of range.
        """
        self.check_node(u)
        return self.graph[u]

    def reverse(self, edge: Edge) -> Edge:
        """Return the arc paired with ``edge``."""
        return self.graph[edge.to][edge.rev]

    def forward_edge(self, edge_id: EdgeID) -> Edge:
        """
        Return the forward arc created for ``edge_id``.

        Raises:
            IndexError: If no edge with this id exists.
        """
        u, pos = self._fwd[edge_id]
        return self.graph[u][pos]

    def edge_endpoints(self, edge_id: EdgeID) -> Tuple[NodeID, NodeID]:
        """Return ``(tail, head)`` of the forward edge ``edge_id``."""
        u, pos = self._fwd[edge_id]
        return u, self.graph[u][pos].to

    def original_capacity(self, edge_id: EdgeID) -> int:
        """Return the capacity given to ``add_edge`` for ``edge_id``."""
        return self._orig_cap[edge_id]

    def residual_capacity(self, edge_id: EdgeID) -> int:
        """Return the current residual capacity of the forward edge ``edge_id``."""
        return self.forward_edge(edge_id).cap

    def edge_flow(self, edge_id: EdgeID) -> int:
        """Return the flow currently carried by ``edge_id``."""
        return self._orig_cap[edge_id] - self.forward_edge(edge_id).cap

    def iter_edges(self) -> Iterator[EdgeTuple]:
        """
        Iterate over forward edges in insertion order.

        Yields:
            EdgeTuple: ``(edge_id, tail, head, original_capacity, residual_capacity)``.
        """
        for edge_id, (u, pos) in enumerate(self._fwd):
            edge = self.graph[u][pos]
            yield edge_id, u, edge.to, self._orig_cap[edge_id], edge.cap
