"""Error taxonomy for residual network construction and flow invocation.

All errors are precondition violations detected before any state is mutated.
They derive from ``ValueError`` so callers that already guard graph calls
with ``except ValueError`` keep working.
"""

from __future__ import annotations


class FlowError(ValueError):
    """Base class for invalid arguments passed to dinicflow operations."""


class NegativeCapacityError(FlowError):
    """Raised when an edge is inserted with a capacity below zero."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Edge capacity must be non-negative, got {capacity}.")


class NodeIndexOutOfRangeError(FlowError):
    """Raised when a node index falls outside ``[0, num_nodes)``."""

    def __init__(self, node: int, num_nodes: int) -> None:
        self.node = node
        self.num_nodes = num_nodes
        super().__init__(
            f"Node index {node} is out of range for a network of {num_nodes} nodes."
        )


class SourceEqualsSinkError(FlowError):
    """Raised when max flow is requested between a node and itself."""

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Source and sink must differ, both are {node}.")
