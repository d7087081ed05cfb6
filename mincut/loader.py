from typing import Iterable

from mincut.errors import InputFormatError
from mincut.graph import Graph


def parse_edge_list(lines: Iterable[str], source: str = "<input>") -> Graph:
    """
    Parse an edge list: one undirected edge per line, two whitespace
    separated 0-indexed vertex ids. Blank lines are skipped.

    The vertex count is the largest id seen + 1, so vertices that never
    appear in a record are isolated.
    """
    edges = []
    max_idx = -1

    for lineno, raw in enumerate(lines, 1):
        parts = raw.split()
        if not parts:
            continue
        if len(parts) != 2:
            raise InputFormatError(
                f"{source}:{lineno}: expected two vertex ids, got {len(parts)} fields")
        try:
            u, v = int(parts[0]), int(parts[1])
        except ValueError:
            raise InputFormatError(
                f"{source}:{lineno}: vertex ids must be integers: {raw.strip()!r}") from None
        if u < 0 or v < 0:
            raise InputFormatError(
                f"{source}:{lineno}: vertex ids must be non-negative: {raw.strip()!r}")
        if u == v:
            raise InputFormatError(f"{source}:{lineno}: self-loop on vertex {u}")

        edges.append((u, v))
        max_idx = max(max_idx, u, v)

    return Graph.from_edges(edges, n=max_idx + 1)


def read_edge_list(path) -> Graph:
    with open(path, "r", encoding="utf-8") as f:
        return parse_edge_list(f, source=str(path))
