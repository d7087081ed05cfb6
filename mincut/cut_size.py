import numpy as np

from mincut.contraction import Cut
from mincut.errors import PartitionInvariantViolation
from mincut.graph import Graph


def cut_size(cut: Cut, graph: Graph) -> int:
    """
    Number of edges of graph crossing the cut.

    Each vertex gets label 1 or 2 depending on which side holds it. Isolated
    vertices stay 0, which is harmless since they have no edges.
    """
    partition = np.zeros(graph.n, dtype=np.int8)
    for side, node in enumerate(cut, 1):
        comps = np.asarray(node.comps, dtype=np.int64)
        if np.any(partition[comps] != 0) or np.unique(comps).size != comps.size:
            raise PartitionInvariantViolation(f"vertex assigned twice while labeling side {side}")
        partition[comps] = side

    edges = graph.edges
    return int(np.count_nonzero(partition[edges[:, 0]] != partition[edges[:, 1]]))
