from typing import NewType

__all__ = ["VertexID"]

VertexID = NewType("VertexID", int)
