from typing import Dict

from .types import VertexID

__all__ = ["Vertex"]


class Vertex:
    """A graph node carrying three independently typed property maps.

    Vertices are normally created by Graph.add_vertex, which assigns an id
    equal to the vertex's position in the graph. The property maps are plain
    dicts; the same label may appear in more than one of them with unrelated
    values.

    Attributes:
        id (VertexID): Position of the vertex in its graph. Read-only.
        string_props (Dict[str, str]): String-valued properties by label.
        int_props (Dict[str, int]): Integer-valued properties by label.
        float_props (Dict[str, float]): Float-valued properties by label.
    """

    def __init__(self, id: VertexID):
        """Initialize a vertex with the given id and empty property maps."""
        self._id = id
        self.string_props: Dict[str, str] = {}
        self.int_props: Dict[str, int] = {}
        self.float_props: Dict[str, float] = {}

    @property
    def id(self) -> VertexID:
        return self._id

    def add_string_props(self, label: str, value: str):
        """Insert or overwrite a string property."""
        self.string_props[label] = value

    def add_int_props(self, label: str, value: int):
        """Insert or overwrite an integer property."""
        self.int_props[label] = value

    def add_float_props(self, label: str, value: float):
        """Insert or overwrite a float property."""
        self.float_props[label] = value

    def __repr__(self):
        return f"Vertex(id: {self._id})"
