from typing import List, Optional, Tuple

import numpy as np

from mincut.errors import GraphTooSmall, InvariantViolation
from mincut.graph import Graph


class ContractionNode:
    """
    A super-vertex: the original vertices merged into it (comps) and the
    indices of the live edges incident to it (edges).
    """
    __slots__ = ['comps', 'edges']

    def __init__(self, comps: Optional[List[int]] = None, edges: Optional[List[int]] = None):
        self.comps = comps if comps is not None else []
        self.edges = edges if edges is not None else []

    def __repr__(self):
        return f"ContractionNode(comps={self.comps}, edges={self.edges})"


Cut = Tuple[ContractionNode, ContractionNode]


class _Contraction:
    """
    Private scratch state of one trial. Nodes and edge endpoints are flat
    arrays addressed by vertex / edge index; a node slot stays live as long as
    its comps list is non-empty.
    """
    __slots__ = ['nodes', 'endpoints', 'remaining', 'num_live']

    def __init__(self, graph: Graph):
        self.endpoints = graph.edges.tolist()
        self.nodes = [ContractionNode([i]) for i in range(graph.n)]
        for i, (u, v) in enumerate(self.endpoints):
            self.nodes[u].edges.append(i)
            self.nodes[v].edges.append(i)

        # isolated vertices take no part in the contraction
        for node in self.nodes:
            if not node.edges:
                node.comps.clear()

        self.remaining = np.ones(len(self.endpoints), dtype=bool)
        self.num_live = sum(1 for node in self.nodes if node.comps)

    def _joins(self, i: int, u: int, v: int) -> bool:
        a, b = self.endpoints[i]
        return (a == u and b == v) or (a == v and b == u)

    def merge(self, edge_index: int) -> None:
        """Contract the edge at edge_index, absorbing the lighter endpoint."""
        u, v = self.endpoints[edge_index]
        if u == v:
            raise InvariantViolation(f"live edge {edge_index} is a self-loop on node {u}")

        # relabeling cost is bounded by merging the smaller edge list into the larger
        if len(self.nodes[u].edges) < len(self.nodes[v].edges):
            u, v = v, u
        survivor = self.nodes[u]
        absorbed = self.nodes[v]

        survivor.comps.extend(absorbed.comps)

        moved = []
        for i in absorbed.edges:
            if self._joins(i, u, v):
                self.remaining[i] = False
                continue
            if self.endpoints[i][0] == v:
                self.endpoints[i][0] = u
            else:
                self.endpoints[i][1] = u
            moved.append(i)

        survivor.edges = [i for i in survivor.edges if self.remaining[i]]
        survivor.edges.extend(moved)

        absorbed.comps = []
        absorbed.edges = []
        self.num_live -= 1

    def live_nodes(self) -> List[ContractionNode]:
        return [node for node in self.nodes if node.comps]

    def run(self, order: np.ndarray) -> Cut:
        for edge_index in order:
            if self.num_live <= 2:
                break
            if not self.remaining[edge_index]:
                continue
            self.merge(int(edge_index))

        live = self.live_nodes()
        if len(live) > 2:
            # out of edges: every live node is its own connected component,
            # so any grouping of them is a cut of size 0
            first, second, *rest = live
            for node in rest:
                second.comps.extend(node.comps)
                second.edges.extend(node.edges)
                node.comps = []
                node.edges = []
            self.num_live = 2
            live = [first, second]

        if len(live) != 2:
            raise InvariantViolation(f"contraction ended with {len(live)} nodes")
        return live[0], live[1]


def contract(graph: Graph, rng: Optional[np.random.Generator] = None) -> Cut:
    """
    One run of Karger's contraction on graph.

    Edges are visited in a single random permutation drawn from rng, which
    is the same as repeatedly picking a uniformly random remaining edge as
    long as edges invalidated by earlier merges are skipped. Returns the two
    surviving super-vertices; their comps partition the non-isolated
    vertices of graph. graph itself is never modified.
    """
    if rng is None:
        rng = np.random.default_rng()

    state = _Contraction(graph)
    if state.num_live < 2:
        raise GraphTooSmall(
            f"need at least 2 vertices with incident edges, got {state.num_live}")

    order = rng.permutation(len(state.endpoints))
    return state.run(order)
