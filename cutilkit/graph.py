"""A directed graph with integer vertex and edge identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

DEFAULT_SIZE = 1024


@dataclass(eq=False)
class Edge:
    """A directed edge from vertex ``src`` to vertex ``dest``."""

    id: int
    src: int
    dest: int
    metadata: Any = None


@dataclass(eq=False)
class Vertex:
    """A vertex and the edges that leave it."""

    id: int
    metadata: Any = None
    num_edges_in: int = 0
    edges: list[Edge] = field(default_factory=list, repr=False)

    def edge(self, idx: int) -> Optional[Edge]:
        """The ``idx``-th outgoing edge, or None if there is none."""
        if 0 <= idx < len(self.edges):
            return self.edges[idx]
        return None

    def num_edges_out(self) -> int:
        """Number of edges that leave this vertex."""
        return len(self.edges)


class Graph:
    """A directed graph.

    Vertices and edges are numbered in the order they are added; ids are
    never reused. ``size`` is the initial capacity for both.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._verts: list[Optional[Vertex]] = [None] * size
        self._edges: list[Optional[Edge]] = [None] * size
        self._num_verts = 0
        self._num_edges = 0
        self._prev_vert_id = 0
        self._prev_edge_id = 0

    def __repr__(self) -> str:
        return f"Graph(vertices={self._num_verts}, edges={self._num_edges})"

    def num_vertices(self) -> int:
        """Number of vertices currently in the graph."""
        return self._num_verts

    def num_edges(self) -> int:
        """Number of edges currently in the graph."""
        return self._num_edges

    def vertices_inserted(self) -> int:
        """One past the highest vertex id ever used."""
        return self._prev_vert_id

    def vertices(self) -> Iterator[Vertex]:
        """Yield the vertices present, in id order."""
        for vertex in self._verts[: self._prev_vert_id]:
            if vertex is not None:
                yield vertex

    def _grow_vertices(self, vertex_id: int) -> None:
        new_size = len(self._verts) * 2
        while new_size <= vertex_id:
            new_size *= 2
        self._verts.extend([None] * (new_size - len(self._verts)))

    def add_vertex(self, metadata: Any = None) -> Vertex:
        """Add a vertex with the next free id."""
        vertex_id = self._prev_vert_id
        self._prev_vert_id += 1
        return self.add_vertex_with_id(vertex_id, metadata)

    def add_vertex_with_id(self, vertex_id: int, metadata: Any = None) -> Vertex:
        """Add a vertex under ``vertex_id``; the id must not be in use."""
        if vertex_id < 0:
            raise ValueError("vertex id must be non-negative")
        if vertex_id >= len(self._verts):
            self._grow_vertices(vertex_id)
        elif self._verts[vertex_id] is not None:
            raise ValueError(f"vertex {vertex_id} already exists")
        if vertex_id >= self._prev_vert_id:
            self._prev_vert_id = vertex_id + 1
        vertex = Vertex(vertex_id, metadata)
        self._verts[vertex_id] = vertex
        self._num_verts += 1
        return vertex

    def get_vertex(self, vertex_id: int) -> Optional[Vertex]:
        """The vertex with ``vertex_id``, or None."""
        if 0 <= vertex_id < self._prev_vert_id:
            return self._verts[vertex_id]
        return None

    def remove_vertex(self, vertex_id: int) -> Vertex:
        """Remove a vertex and every edge touching it; return the vertex."""
        vertex = self.get_vertex(vertex_id)
        if vertex is None:
            raise KeyError(vertex_id)
        for edge in list(self._edges[: self._prev_edge_id]):
            if edge is not None and vertex_id in (edge.src, edge.dest):
                self.remove_edge(edge.id)
        self._verts[vertex_id] = None
        self._num_verts -= 1
        return vertex

    def add_edge(self, src: int, dest: int, metadata: Any = None) -> Edge:
        """Add an edge from ``src`` to ``dest``; both must exist."""
        v_src = self.get_vertex(src)
        v_dest = self.get_vertex(dest)
        if v_src is None:
            raise KeyError(src)
        if v_dest is None:
            raise KeyError(dest)
        edge_id = self._prev_edge_id
        self._prev_edge_id += 1
        if edge_id >= len(self._edges):
            self._edges.extend([None] * len(self._edges))
        edge = Edge(edge_id, src, dest, metadata)
        v_src.edges.append(edge)
        v_dest.num_edges_in += 1
        self._edges[edge_id] = edge
        self._num_edges += 1
        return edge

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        """The edge with ``edge_id``, or None."""
        if 0 <= edge_id < self._prev_edge_id:
            return self._edges[edge_id]
        return None

    def remove_edge(self, edge_id: int) -> Edge:
        """Remove an edge and return it.

        The last outgoing edge of the source vertex takes the removed
        edge's place in that vertex's edge order.
        """
        edge = self.get_edge(edge_id)
        if edge is None:
            raise KeyError(edge_id)
        self._edges[edge_id] = None
        self._num_edges -= 1
        v_src = self._verts[edge.src]
        out = v_src.edges
        for i, candidate in enumerate(out):
            if candidate is edge:
                out[i] = out[-1]
                out.pop()
                break
        self._verts[edge.dest].num_edges_in -= 1
        return edge

    def breadth_first_traverse(self, vertex: Vertex) -> list[int]:
        """Ids of the vertices reachable from ``vertex``, breadth first."""
        order = [vertex.id]
        seen = {vertex.id}
        for current in order:
            for edge in self._verts[current].edges:
                if edge.dest not in seen:
                    seen.add(edge.dest)
                    order.append(edge.dest)
        return order

    def depth_first_traverse(self, vertex: Vertex) -> list[int]:
        """Ids of the vertices reachable from ``vertex``, depth first."""
        order = [vertex.id]
        seen = {vertex.id}
        stack = [iter(vertex.edges)]
        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                continue
            if edge.dest in seen:
                continue
            seen.add(edge.dest)
            order.append(edge.dest)
            stack.append(iter(self._verts[edge.dest].edges))
        return order