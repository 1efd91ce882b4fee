"""The state graph: every board configuration is a vertex.

Vertices are named 0 through V-1. Edges are stored directed, one per
(vertex, button) pair, and the toggle graph is undirected in practice
because applying the same mask twice returns to the start. Parallel edges
and self-loops are permitted.
"""

from typing import Iterable, Optional

import networkx
import structlog

logger = structlog.get_logger()


class StateGraph:
    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise ValueError("Number of vertices must be non-negative")
        self._graph = networkx.MultiDiGraph()
        self._graph.add_nodes_from(range(vertex_count))
        self._vertex_count = vertex_count
        self._edge_count = 0

    @classmethod
    def from_masks(cls, masks: Iterable[int]) -> "StateGraph":
        """Build the toggle graph over every N-bit vertex, N = len(masks).

        Each vertex gets one edge per mask, in button order.
        """
        masks = tuple(masks)
        graph = cls(2 ** len(masks))
        for i in range(graph.vertex_count):
            for button, mask in enumerate(masks):
                graph.add_edge(i, i ^ mask, button=button)
        logger.debug(
            "state graph built",
            vertices=graph.vertex_count,
            edges=graph.edge_count,
        )
        return graph

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def nx_graph(self) -> networkx.MultiDiGraph:
        """The underlying networkx graph. Treat it as read-only."""
        return self._graph

    def validate_vertex(self, v: int) -> int:
        if not 0 <= v < self._vertex_count:
            raise ValueError(
                f"vertex {v} is not between 0 and {self._vertex_count - 1}"
            )
        return v

    def add_edge(self, v: int, w: int, button: Optional[int] = None):
        """Add the directed edge v->w, optionally labelled with a button."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._graph.add_edge(v, w, button=button, order=self._edge_count)
        self._edge_count += 1

    def adjacency_of(self, v: int) -> list[int]:
        """Vertices adjacent to v, in the order the edges were added."""
        self.validate_vertex(v)
        edges = sorted(self._graph.out_edges(v, data="order"), key=lambda e: e[2])
        return [w for _, w, _ in edges]

    def degree_of(self, v: int) -> int:
        self.validate_vertex(v)
        return self._graph.out_degree(v)

    def buttons_between(self, v: int, w: int) -> list[Optional[int]]:
        """Labels of every stored v->w edge, in the order they were added."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        edges = self._graph.get_edge_data(v, w) or {}
        return [data["button"] for data in edges.values()]

    def __str__(self) -> str:
        lines = [f"{self.vertex_count} vertices, {self.edge_count} edges"]
        for v in range(self.vertex_count):
            lines.append(f"{v}: " + " ".join(str(w) for w in self.adjacency_of(v)))
        return "\n".join(lines) + "\n"
