from adjgraph import Vertex


def test_can_make_vertices():
    v = Vertex(5)
    assert v.id == 5
    assert v.string_props == {}
    assert v.int_props == {}
    assert v.float_props == {}


def test_props_last_write_wins():
    v = Vertex(0)
    v.add_string_props("k", "v1")
    v.add_string_props("k", "v2")
    assert v.string_props == {"k": "v2"}

    v.add_int_props("count", 1)
    v.add_int_props("count", -(2**63))
    assert v.int_props == {"count": -(2**63)}

    v.add_float_props("weight", 0.5)
    v.add_float_props("weight", 1.5)
    assert v.float_props == {"weight": 1.5}


def test_prop_maps_are_independent():
    v = Vertex(0)
    v.add_string_props("name", "a")
    v.add_int_props("name", 1)
    v.add_float_props("name", 2.0)
    assert v.string_props["name"] == "a"
    assert v.int_props["name"] == 1
    assert v.float_props["name"] == 2.0

    # Distinct vertices do not share maps.
    w = Vertex(1)
    assert w.string_props == {}


def test_vertex_repr():
    assert repr(Vertex(3)) == "Vertex(id: 3)"
    assert str(Vertex(3)) == "Vertex(id: 3)"
