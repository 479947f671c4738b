"""Tests for dinicflow.lib.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from dinicflow.config import FLOW_CONFIG
from dinicflow.exceptions import NegativeCapacityError
from dinicflow.lib.algorithms.max_flow import calc_max_flow
from dinicflow.lib.nx import EdgeMap, NodeMap, from_networkx, to_networkx


class TestNodeMap:
    """Tests for NodeMap class."""

    def test_from_names_creates_bidirectional_mapping(self):
        """NodeMap.from_names creates correct to_index and to_name mappings."""
        node_map = NodeMap.from_names(["A", "B", "C"])

        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}

    def test_from_names_empty_list(self):
        node_map = NodeMap.from_names([])
        assert len(node_map) == 0
        assert node_map.to_index == {}
        assert node_map.to_name == {}

    def test_mixed_type_node_names(self):
        node_map = NodeMap.from_names(["A", 1, (0, 1)])
        assert len(node_map) == 3
        assert node_map.to_index[(0, 1)] == 2


class TestEdgeMap:
    """Tests for EdgeMap class."""

    def test_edge_map_empty_construction(self):
        edge_map = EdgeMap()
        assert len(edge_map) == 0
        assert edge_map.to_ref == {}
        assert edge_map.from_ref == {}

    def test_edge_map_created_from_digraph(self):
        """Edge ids follow NetworkX edge iteration order."""
        G = nx.DiGraph()
        G.add_edge("A", "B", capacity=100)
        G.add_edge("B", "C", capacity=50)

        _, _, edge_map = from_networkx(G)

        assert len(edge_map) == 2
        assert edge_map.to_ref[0] == ("A", "B", 0)
        assert edge_map.to_ref[1] == ("B", "C", 0)
        assert edge_map.from_ref[("B", "C", 0)] == [1]

    def test_edge_map_from_multidigraph(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", capacity=100)  # key=0
        G.add_edge("A", "B", capacity=50)  # key=1

        network, _, edge_map = from_networkx(G)

        assert len(edge_map) == 2
        assert {edge_map.to_ref[0], edge_map.to_ref[1]} == {
            ("A", "B", 0),
            ("A", "B", 1),
        }
        assert network.num_edges() == 2

    def test_edge_map_bidirectional_maps_both_to_same_ref(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", capacity=100)

        network, node_map, edge_map = from_networkx(G, bidirectional=True)

        assert edge_map.to_ref[0] == ("A", "B", 0)
        assert edge_map.to_ref[1] == ("A", "B", 0)
        assert edge_map.from_ref[("A", "B", 0)] == [0, 1]
        assert network.edge_endpoints(1) == (
            node_map.to_index["B"],
            node_map.to_index["A"],
        )


class TestFromNetworkx:
    def test_nodes_sorted_by_str(self):
        G = nx.DiGraph()
        G.add_edge("src", "dst", capacity=1)
        network, node_map, _ = from_networkx(G)

        assert network.num_nodes() == 2
        assert node_map.to_index == {"dst": 0, "src": 1}

    def test_isolated_nodes_kept(self):
        G = nx.DiGraph()
        G.add_nodes_from(["A", "B", "C"])
        network, _, edge_map = from_networkx(G)
        assert network.num_nodes() == 3
        assert network.num_edges() == 0
        assert len(edge_map) == 0

    def test_default_capacity(self):
        G = nx.DiGraph()
        G.add_edge("A", "B")
        network, _, _ = from_networkx(G)
        assert network.original_capacity(0) == FLOW_CONFIG.default_capacity

        network, _, _ = from_networkx(G, default_capacity=9)
        assert network.original_capacity(0) == 9

    def test_custom_capacity_attr(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", bw=12)
        network, _, _ = from_networkx(G, capacity_attr="bw")
        assert network.original_capacity(0) == 12

    def test_integral_float_capacity_accepted(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", capacity=3.0)
        network, _, _ = from_networkx(G)
        assert network.original_capacity(0) == 3

    def test_fractional_capacity_rejected(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", capacity=2.5)
        with pytest.raises(TypeError):
            from_networkx(G)

    def test_negative_capacity_rejected(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", capacity=-2)
        with pytest.raises(NegativeCapacityError):
            from_networkx(G)

    def test_empty_graph_rejected(self):
        with pytest.raises(ValueError):
            from_networkx(nx.DiGraph())

    def test_non_graph_rejected(self):
        with pytest.raises(TypeError):
            from_networkx({"A": ["B"]})

    def test_undirected_graph_bidirectional_flow(self):
        G = nx.Graph()
        G.add_edge("A", "B", capacity=4)
        G.add_edge("B", "C", capacity=3)
        network, node_map, _ = from_networkx(G, bidirectional=True)

        a, c = node_map.to_index["A"], node_map.to_index["C"]
        assert calc_max_flow(network, c, a) == 3

    def test_max_flow_matches_networkx(self):
        G = nx.DiGraph()
        G.add_edge("s", "a", capacity=10)
        G.add_edge("s", "b", capacity=5)
        G.add_edge("a", "b", capacity=15)
        G.add_edge("a", "t", capacity=5)
        G.add_edge("b", "t", capacity=10)

        network, node_map, _ = from_networkx(G)
        flow = calc_max_flow(network, node_map.to_index["s"], node_map.to_index["t"])
        assert flow == nx.maximum_flow_value(G, "s", "t") == 15


class TestToNetworkx:
    def test_round_trip_with_flow(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", capacity=5)
        G.add_edge("B", "C", capacity=3)
        network, node_map, edge_map = from_networkx(G)
        calc_max_flow(network, node_map.to_index["A"], node_map.to_index["C"])

        G_out = to_networkx(network, node_map)

        assert isinstance(G_out, nx.MultiDiGraph)
        assert sorted(G_out.nodes()) == ["A", "B", "C"]
        assert G_out.edges["A", "B", 0] == {"capacity": 5, "flow": 3}
        assert G_out.edges["B", "C", 1] == {"capacity": 3, "flow": 3}
        assert edge_map.to_ref[1][:2] == ("B", "C")

    def test_without_node_map_uses_indices(self, worked_example):
        G_out = to_networkx(worked_example, flow_attr="f")
        assert sorted(G_out.nodes()) == [0, 1, 2, 3]
        assert G_out.number_of_edges() == 5
        assert G_out.edges[1, 2, 4] == {"capacity": 1, "f": 0}
