from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import networkx as nx
import numpy as np


def _readonly_edges(edges) -> np.ndarray:
    arr = np.asarray(edges, dtype=np.int64)
    if arr.size == 0:
        arr = np.zeros((0, 2), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("edges must be a sequence of (u, v) pairs")
    arr = arr.copy()
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Graph:
    """
    Undirected, unweighted multigraph on vertices 0..n-1.

    edges is an (m, 2) read-only integer array; the position of a row is the
    identity of that edge. Parallel edges are kept, self-loops are not allowed.
    Instances are shared read-only by every contraction trial.
    """
    n: int
    edges: np.ndarray

    def __post_init__(self):
        edges = _readonly_edges(self.edges)
        object.__setattr__(self, "edges", edges)

        if self.n < 0:
            raise ValueError(f"n must be non-negative, got {self.n}")
        if edges.shape[0] == 0:
            return
        if edges.min() < 0 or edges.max() >= self.n:
            raise ValueError(f"edge endpoints must lie in [0, {self.n})")
        loops = np.flatnonzero(edges[:, 0] == edges[:, 1])
        if loops.size:
            raise ValueError(f"self-loop at edge index {int(loops[0])}")

    @property
    def m(self) -> int:
        return int(self.edges.shape[0])

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]], n: Optional[int] = None) -> "Graph":
        """Build a graph from (u, v) pairs; n defaults to the largest id + 1."""
        arr = _readonly_edges(list(edges))
        if n is None:
            n = int(arr.max()) + 1 if arr.shape[0] else 0
        return cls(n=n, edges=arr)

    @classmethod
    def from_adjacency_matrix(cls, graph_matrix: np.ndarray) -> "Graph":
        """
        graph_matrix is an (n x n) symmetric adjacency matrix. Every non-zero
        entry of the upper triangle becomes one edge; weights are ignored.
        """
        if graph_matrix.shape[0] != graph_matrix.shape[1]:
            raise ValueError("graph_matrix must be square")
        n = graph_matrix.shape[0]
        rows, cols = np.where(np.triu(graph_matrix, k=1) > 0)
        edges = np.stack([rows.astype(int), cols.astype(int)], axis=1)
        return cls(n=n, edges=edges)

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":
        """Parallel edges of a MultiGraph are kept; self-loops raise ValueError."""
        loops = list(nx.selfloop_edges(G))
        if loops:
            raise ValueError(f"self-loop on node {loops[0][0]!r}")
        # node labels may be anything, relabel them 0..n-1 in sorted order
        H = nx.convert_node_labels_to_integers(G, ordering="sorted")
        return cls(n=H.number_of_nodes(), edges=list(H.edges()))

    def to_networkx(self) -> nx.MultiGraph:
        G = nx.MultiGraph()
        G.add_nodes_from(range(self.n))
        G.add_edges_from(self.edges.tolist())
        return G

    def degrees(self) -> np.ndarray:
        return np.bincount(self.edges.ravel(), minlength=self.n)

    def non_isolated(self) -> np.ndarray:
        """Ids of the vertices with at least one incident edge."""
        return np.flatnonzero(self.degrees() > 0)
