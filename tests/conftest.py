"""Global pytest configuration and sample networks.

Node names in the diagrams map to indices A=0, B=1, C=2, D=3, E=4 unless
stated otherwise. Every fixture returns a freshly built network, so tests may
mutate it freely.
"""

from __future__ import annotations

import pytest

from dinicflow.lib.graph import ResidualNetwork


@pytest.fixture
def worked_example():
    # s=0, t=3
    #
    #        [3]      [2]
    #   ┌────────►1─────────┐
    #   │         │         ▼
    #   0      [1]│         3
    #   │         ▼         ▲
    #   └────────►2─────────┘
    #        [2]      [3]
    #
    g = ResidualNetwork(4)
    g.add_edge(0, 1, 3)
    g.add_edge(0, 2, 2)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(1, 2, 1)
    return g


@pytest.fixture
def line1():
    # Capacity:
    #     [5]      [1,3,7]
    #  A◄───────►B◄───────►C
    #
    g = ResidualNetwork(3)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 0, 5)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 1, 1)
    g.add_edge(1, 2, 3)
    g.add_edge(2, 1, 3)
    g.add_edge(1, 2, 7)
    g.add_edge(2, 1, 7)
    return g


@pytest.fixture
def square4():
    # Capacity:
    #    [100,200]    [125]
    #   ┌────────►B──────────┐
    #   │         │▲         │
    #   │         ││         ▼
    #   A         ││[50,200] C
    #   │         ││         ▲
    #   │  [75]   ▼▼ [50,200]│
    #   └────────►D──────────┘
    #
    g = ResidualNetwork(4)
    g.add_edge(0, 1, 100)
    g.add_edge(1, 2, 125)
    g.add_edge(0, 3, 75)
    g.add_edge(3, 2, 50)
    g.add_edge(1, 3, 50)
    g.add_edge(3, 1, 50)
    g.add_edge(0, 1, 200)
    g.add_edge(1, 3, 200)
    g.add_edge(3, 2, 200)
    return g


@pytest.fixture
def graph5():
    """Fully connected graph with 5 nodes, each edge has capacity=1."""
    g = ResidualNetwork(5)
    for src in range(5):
        for dst in range(5):
            if src != dst:
                g.add_edge(src, dst, 1)
    return g


@pytest.fixture
def disconnected():
    # A──►B    C──►D
    g = ResidualNetwork(4)
    g.add_edge(0, 1, 10)
    g.add_edge(2, 3, 10)
    return g


def assert_capacity_pairing(network: ResidualNetwork) -> None:
    """Check that every forward/reverse pair still sums to the original capacity."""
    for edge_id, _, _, orig, residual in network.iter_edges():
        fwd = network.forward_edge(edge_id)
        rev = network.reverse(fwd)
        assert residual >= 0
        assert rev.cap >= 0
        assert fwd.cap + rev.cap == orig
        assert network.reverse(rev) is fwd


@pytest.fixture
def check_pairing():
    """Expose the capacity-pairing assertion to tests."""
    return assert_capacity_pairing
