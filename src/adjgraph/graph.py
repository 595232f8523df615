import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .exceptions import InvalidVertexException
from .logging_util import phase_debug, phase_info, tqdm_debug, tqdm_info
from .types import VertexID
from .vertex import Vertex

__all__ = ["Graph"]

logger = logging.getLogger(__name__)


class Graph:
    """Adjacency-list graph with dense integer vertex ids.

    Vertex ids are positions: the vertex returned by add_vertex() is stored at
    vertices[id] and its neighbors at edges[id]. Vertices and edges are only
    ever appended.

    In an undirected graph every edge is recorded in both endpoints'
    adjacency lists, so num_edges() counts it twice.

    Attributes:
        vertices (List[Vertex]): Vertex records, indexed by id.
        edges (List[List[VertexID]]): Adjacency lists, parallel to vertices.
    """

    def __init__(self, is_directed: bool):
        self._is_directed = is_directed
        self.vertices: List[Vertex] = []
        self.edges: List[List[VertexID]] = []

    @property
    def is_directed(self) -> bool:
        return self._is_directed

    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        """Total length of all adjacency lists.

        Undirected edges appear once in each endpoint's list and so
        contribute 2 to this count.
        """
        return int(np.sum(self.out_degrees()))

    def out_degrees(self) -> np.ndarray:
        """Length of each vertex's adjacency list, indexed by vertex id."""
        return np.array([len(adj) for adj in self.edges], dtype=np.int64)

    def _has_vertex(self, vertex_id: VertexID) -> bool:
        return 0 <= vertex_id < self.num_vertices()

    def get_vertex(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex with this id, or None if there is none."""
        if not self._has_vertex(vertex_id):
            return None
        return self.vertices[vertex_id]

    def get_adjacent_vertices(self, vertex_id: VertexID) -> Optional[List[VertexID]]:
        """Return the (live) adjacency list of a vertex, or None if there is none."""
        if not self._has_vertex(vertex_id):
            return None
        return self.edges[vertex_id]

    def add_vertex(self) -> VertexID:
        n = VertexID(self.num_vertices())
        self.vertices.append(Vertex(n))
        # Empty adjacency list for the new vertex.
        self.edges.append([])
        logger.debug(f"Added vertex {n}.")
        return n

    def add_vertices(self, n: int) -> List[VertexID]:
        return [self.add_vertex() for _ in range(n)]

    def add_edge(self, from_id: VertexID, to_id: VertexID):
        """Append to_id to from_id's adjacency list (and the reverse if undirected).

        Duplicate edges are kept.

        Raises:
            InvalidVertexException: If either endpoint is not an existing
                vertex id. Raised before the graph is modified.
        """
        for vertex_id in (from_id, to_id):
            if not self._has_vertex(vertex_id):
                raise InvalidVertexException(vertex_id, self.num_vertices())

        self.edges[from_id].append(to_id)
        if not self._is_directed:
            self.edges[to_id].append(from_id)
        logger.debug(f"Added edge {from_id} -> {to_id}.")

    def add_edge_list(
        self, edge_list: Iterable[Tuple[VertexID, VertexID]], verbose: bool = False
    ):
        """Add each (from_id, to_id) pair in order.

        Pairs preceding an invalid pair stay in the graph.

        Args:
            edge_list: (from_id, to_id) pairs.
            verbose: Report the phase and progress at INFO rather than DEBUG.
        """
        if verbose:
            phase, progress = phase_info, tqdm_info
        else:
            phase, progress = phase_debug, tqdm_debug
        with phase("Adding edges"):
            for from_id, to_id in progress(edge_list, desc="edges"):
                self.add_edge(from_id, to_id)

    def __len__(self):
        return self.num_vertices()

    def __str__(self):
        kind = "DirectedGraph" if self._is_directed else "UndirectedGraph"
        lines = []
        for vertex, adj in zip(self.vertices, self.edges):
            neighbors = "".join(f"{i}, " for i in adj)
            lines.append(f"{vertex.id} => [{neighbors}],")
        return f"{kind}(" + "\n".join(lines) + ")"
