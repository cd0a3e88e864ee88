import pytest

from pdfgradients.errors import GradientAlreadyRegistered
from pdfgradients.output import GradientEntry, GradientRegistry


@pytest.fixture
def registry():
    registry = GradientRegistry()
    registry.register("sky", 3, 4)
    registry.register(("page", 2), 8, 9)
    return registry


def test_lookup(registry):
    assert registry.lookup("sky") == GradientEntry(3, 4, "P1", "Sh1")
    assert registry.lookup(("page", 2)).pattern_object_id == 9
    assert registry.lookup("unknown") is None
    assert "sky" in registry
    assert len(registry) == 2
    assert [name for name, _ in registry.items()] == ["sky", ("page", 2)]


def test_entries_are_immutable(registry):
    with pytest.raises(GradientAlreadyRegistered):
        registry.register("sky", 30, 40)
    assert registry.lookup("sky") == (3, 4, "P1", "Sh1")
    with pytest.raises(AttributeError):
        registry.lookup("sky").shading_object_id = 5


def test_paint_operator(registry):
    assert registry.paint_operator("sky") == "/Pattern cs /P1 scn"
    assert registry.paint_operator(("page", 2), stroke=True) == "/Pattern CS /P2 SCN"
    with pytest.raises(KeyError):
        registry.paint_operator("unknown")


def test_resources_dict(registry):
    assert registry.resources_dict() == "<< /P1 4 0 R /P2 9 0 R >>"
    assert registry.resources_dict(["P2"]) == "<< /P2 9 0 R >>"
    assert registry.resources_dict([]) == "<<>>"


def test_patterns_used_in(registry):
    stream = "q 0 0 m 10 10 l /Pattern cs /P1 scn f Q\nq /Pattern CS /P2 SCN S Q"
    assert registry.patterns_used_in(stream) == {"P1", "P2"}
    assert registry.patterns_used_in("0 0 1 rg f") == set()


def test_shading_operator(registry):
    assert registry.lookup("sky").shading_resource_name == "Sh1"
    assert registry.shading_operator("sky") == "/Sh1 sh"
    assert registry.shading_operator(("page", 2)) == "/Sh2 sh"
    with pytest.raises(KeyError):
        registry.shading_operator("unknown")


def test_shading_resources_dict(registry):
    assert registry.shading_resources_dict() == "<< /Sh1 3 0 R /Sh2 8 0 R >>"
    assert registry.shading_resources_dict(["Sh1"]) == "<< /Sh1 3 0 R >>"
    assert registry.shading_resources_dict([]) == "<<>>"


def test_shadings_used_in(registry):
    stream = "q 0 0 100 100 re W n /Sh2 sh Q /Pattern cs /P1 scn"
    assert registry.shadings_used_in(stream) == {"Sh2"}
    assert registry.patterns_used_in(stream) == {"P1"}
