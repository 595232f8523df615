class InvalidVertexException(IndexError):
    """Raised when an edge endpoint is not the id of an existing vertex."""

    def __init__(self, vertex_id, num_vertices):
        self.vertex_id = vertex_id
        self.num_vertices = num_vertices
        super().__init__(
            f"Vertex {vertex_id} invalid: not in range(0, {num_vertices})."
        )
