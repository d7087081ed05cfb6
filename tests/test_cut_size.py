import numpy as np
import pytest

from graph_generators.barabasi_albert import generate_ba
from mincut.contraction import ContractionNode, contract
from mincut.cut_size import cut_size
from mincut.errors import PartitionInvariantViolation
from mincut.graph import Graph


def brute_force_cut(cut, graph):
    side = {v: 1 for v in cut[0].comps}
    side.update({v: 2 for v in cut[1].comps})
    return sum(1 for u, v in graph.edges.tolist() if side.get(u) != side.get(v))


def test_counts_crossing_edges():
    graph = Graph.from_edges([(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
    cut = (ContractionNode([0, 1]), ContractionNode([2, 3]))
    # (1, 2), (3, 0), (0, 2)
    assert cut_size(cut, graph) == 3


def test_parallel_edges_count_separately():
    graph = Graph.from_edges([(0, 1), (0, 1), (1, 2)])
    cut = (ContractionNode([0]), ContractionNode([1, 2]))
    assert cut_size(cut, graph) == 2


def test_isolated_vertices_do_not_contribute():
    graph = Graph.from_edges([(0, 1), (1, 2)], n=5)
    cut = (ContractionNode([0, 1]), ContractionNode([2]))
    assert cut_size(cut, graph) == 1


@pytest.mark.parametrize("seed", range(5))
def test_matches_brute_force_on_contracted_cuts(seed):
    rng = np.random.default_rng(seed)
    graph = generate_ba(30, 2, rng)
    cut = contract(graph, rng)
    size = cut_size(cut, graph)
    assert 0 <= size <= graph.m
    assert size == brute_force_cut(cut, graph)


def test_triangle_always_cuts_two_edges():
    graph = Graph.from_edges([(0, 1), (1, 2), (2, 0)])
    for seed in range(20):
        assert cut_size(contract(graph, np.random.default_rng(seed)), graph) == 2


@pytest.mark.parametrize("first, second", [
    ([0, 1], [1, 2]),
    ([0, 0], [1, 2]),
])
def test_vertex_on_both_sides_is_fatal(first, second):
    graph = Graph.from_edges([(0, 1), (1, 2)])
    with pytest.raises(PartitionInvariantViolation):
        cut_size((ContractionNode(first), ContractionNode(second)), graph)
