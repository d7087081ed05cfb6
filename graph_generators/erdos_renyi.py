from typing import Optional

import numpy as np

from mincut.graph import Graph


def generate_er(n: int, p: float, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    Returns:
        Graph: n vertices, each of the n(n-1)/2 possible edges present
               independently with probability p.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be in [0, 1]")
    if rng is None:
        rng = np.random.default_rng()

    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    matrix[rows[edges], cols[edges]] = 1

    # mirror the matrix to make it symmetric (undirected)
    matrix[cols[edges], rows[edges]] = 1

    return Graph.from_adjacency_matrix(matrix)
