"""Library core for dinicflow.

This package contains the residual network, the max-flow algorithms and
integration modules for external libraries.
"""

from dinicflow.lib.graph import Edge, ResidualNetwork
from dinicflow.lib.nx import EdgeMap, NodeMap, from_networkx, to_networkx

__all__ = [
    "Edge",
    "ResidualNetwork",
    "EdgeMap",
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
