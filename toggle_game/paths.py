"""Breadth first search over a StateGraph."""

import networkx
import structlog

from toggle_game.graph import StateGraph

logger = structlog.get_logger()


class BreadthFirstPaths:
    """Shortest paths (fewest edges) from one source vertex.

    The search runs once, in the constructor. Neighbours are visited in
    adjacency order, so the first vertex to discover w becomes edge_to[w].
    Each instance belongs to a single query; build a new one per source.
    """

    def __init__(self, graph: StateGraph, source: int):
        self.graph = graph
        self.source = graph.validate_vertex(source)
        self._dist_to: dict[int, int] = {source: 0}
        self._edge_to: dict[int, int] = {}
        for v, w in networkx.bfs_edges(graph.nx_graph, source):
            self._dist_to[w] = self._dist_to[v] + 1
            self._edge_to[w] = v
        logger.debug("bfs complete", source=source, reached=len(self._dist_to))

    def has_path_to(self, v: int) -> bool:
        self.graph.validate_vertex(v)
        return v in self._dist_to

    def _validate_reachable(self, v: int):
        if not self.has_path_to(v):
            raise ValueError(f"vertex {v} is not reachable from {self.source}")

    def dist_to(self, v: int) -> int:
        """Number of edges on a shortest path from the source to v"""
        self._validate_reachable(v)
        return self._dist_to[v]

    def path_to(self, v: int) -> list[int]:
        """Vertices of a shortest path from the source to v, both inclusive"""
        self._validate_reachable(v)
        path = [v]
        while v != self.source:
            v = self._edge_to[v]
            path.append(v)
        path.reverse()
        return path

    get_path = path_to
