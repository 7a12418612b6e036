import pytest

from pockets.geometry import Vec2
from pockets.triangle_renderer import TriangleRenderable, TriangleRenderer, Vertex


class Quad(TriangleRenderable):
    def __init__(self, x, layer=0):
        self.x = x
        self.layer = layer

    def vertices(self):
        return [Vertex(Vec2(self.x, float(i))) for i in range(4)]


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        TriangleRenderable()


def test_single_strip_is_unchanged():
    renderer = TriangleRenderer()
    quad = Quad(1.0)
    renderer.add(quad)
    assert renderer.render() == quad.vertices()


def test_strips_joined_by_degenerate_triangles():
    renderer = TriangleRenderer()
    a, b = Quad(1.0), Quad(2.0)
    renderer.add(a)
    renderer.add(b)
    strip = renderer.render()
    assert len(strip) == 4 + 2 + 4
    assert strip[4] == a.vertices()[-1]
    assert strip[5] == b.vertices()[0]
    assert strip[6:] == b.vertices()
    assert renderer.strip == strip


def test_empty_renderer_gives_empty_strip():
    assert TriangleRenderer().render() == []


def test_sort_by_layer():
    renderer = TriangleRenderer()
    high, low = Quad(1.0, layer=3), Quad(2.0, layer=1)
    renderer.add(high)
    renderer.add(low)
    renderer.sort()
    assert list(renderer) == [low, high]
    assert renderer.render()[0] == low.vertices()[0]


def test_remove_and_detach():
    renderer = TriangleRenderer()
    a, b = Quad(1.0), Quad(2.0)
    renderer.add(a)
    renderer.add(b)
    renderer.remove(a)
    assert a not in renderer
    b.detach()
    assert len(renderer) == 0


def test_adding_to_second_renderer_moves_element():
    first, second = TriangleRenderer(), TriangleRenderer()
    quad = Quad(1.0)
    first.add(quad)
    second.add(quad)
    assert quad not in first
    assert quad in second


def test_vertex_defaults_to_opaque_white():
    assert Vertex().color == (255, 255, 255, 255)