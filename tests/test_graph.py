import networkx as nx
import numpy as np
import pytest

from mincut.graph import Graph


def test_from_edges_infers_vertex_count():
    graph = Graph.from_edges([(0, 1), (1, 4)])
    assert graph.n == 5
    assert graph.m == 2
    assert graph.edges.tolist() == [[0, 1], [1, 4]]


def test_empty_graph():
    graph = Graph.from_edges([])
    assert graph.n == 0
    assert graph.m == 0
    assert graph.edges.shape == (0, 2)


def test_edges_are_read_only():
    source = [[0, 1], [1, 2]]
    graph = Graph.from_edges(source)
    with pytest.raises(ValueError):
        graph.edges[0, 0] = 2
    source[0][0] = 2
    assert graph.edges[0, 0] == 0


def test_parallel_edges_are_kept():
    graph = Graph.from_edges([(0, 1), (1, 0), (0, 1)])
    assert graph.m == 3
    assert graph.degrees().tolist() == [3, 3]


def test_rejects_self_loop_and_out_of_range_ids():
    with pytest.raises(ValueError, match="self-loop"):
        Graph.from_edges([(0, 1), (2, 2)])
    with pytest.raises(ValueError):
        Graph.from_edges([(0, 3)], n=3)
    with pytest.raises(ValueError):
        Graph.from_edges([(-1, 3)])


def test_non_isolated_vertices():
    graph = Graph.from_edges([(1, 3)], n=6)
    assert graph.non_isolated().tolist() == [1, 3]


def test_from_adjacency_matrix_reads_upper_triangle():
    matrix = np.array([
        [0, 1, 0],
        [1, 0, 2],
        [0, 2, 0],
    ])
    graph = Graph.from_adjacency_matrix(matrix)
    assert graph.n == 3
    assert sorted(map(tuple, graph.edges.tolist())) == [(0, 1), (1, 2)]


def test_networkx_round_trip():
    G = nx.cycle_graph(["a", "b", "c", "d"])
    graph = Graph.from_networkx(G)
    assert graph.n == 4
    assert graph.m == 4

    H = graph.to_networkx()
    assert isinstance(H, nx.MultiGraph)
    assert H.number_of_nodes() == 4
    assert H.number_of_edges() == 4


def test_from_networkx_rejects_self_loop():
    with pytest.raises(ValueError, match="self-loop"):
        Graph.from_networkx(nx.Graph([(0, 1), (1, 1)]))


def test_from_networkx_keeps_parallel_edges():
    G = nx.MultiGraph([(0, 1), (0, 1), (1, 2)])
    assert Graph.from_networkx(G).m == 3
