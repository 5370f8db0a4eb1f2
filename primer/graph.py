"""A directed graph held as a mapping from node to its successors."""

from __future__ import annotations

from collections import defaultdict


class Graph:
    """A directed graph of string nodes."""

    def __init__(self) -> None:
        self._edges: defaultdict[str, set[str]] = defaultdict(set)

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from src to dst."""
        self._edges[src].add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from src to dst."""
        edges = self._edges.get(src)
        return edges is not None and dst in edges


def main(argv: list[str] | None = None) -> int:
    """Build a small graph and print whether some edges exist."""
    g = Graph()
    g.add_edge("a", "b")
    g.add_edge("c", "d")
    g.add_edge("a", "d")
    g.add_edge("d", "a")
    queries = [
        ("a", "b"),
        ("c", "d"),
        ("a", "d"),
        ("d", "a"),
        ("x", "b"),
        ("c", "d"),
        ("x", "d"),
        ("d", "x"),
    ]
    for src, dst in queries:
        print("true" if g.has_edge(src, dst) else "false")
    return 0