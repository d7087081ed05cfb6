from typing import Optional

import numpy as np

from mincut.graph import Graph


def generate_ba(n: int, m: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The first m nodes form a clique. With m=1 that seed is a
                 single vertex with no edges, so the first new node attaches
                 uniformly and the result is a random tree.
        rng: Source of randomness, a fresh default_rng() when omitted.

    Returns:
        Graph: connected, with m(m-1)/2 + (n-m)m edges.
    """
    m0 = m  # initial number of nodes, must be >= m
    if m < 1:
        raise ValueError("m must be >= 1")
    if n < m0:
        raise ValueError("n must be >= m")
    if rng is None:
        rng = np.random.default_rng()

    matrix = np.zeros((n, n), dtype=int)

    rows, cols = np.triu_indices(m0, k=1)
    matrix[rows, cols] = 1
    matrix[cols, rows] = 1

    degrees = np.sum(matrix, axis=1)

    for i in range(m0, n):
        current_degrees = degrees[:i]
        total_degree = np.sum(current_degrees)

        if total_degree == 0:
            # if disconnected, connect randomly
            targets = rng.choice(i, size=m, replace=False)
        else:
            probabilities = current_degrees / total_degree
            targets = rng.choice(i, size=m, replace=False, p=probabilities)

        matrix[i, targets] = 1
        matrix[targets, i] = 1

        degrees[i] = m
        degrees[targets] += 1

    return Graph.from_adjacency_matrix(matrix)
