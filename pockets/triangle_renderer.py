"""Batching of renderables into a single triangle strip."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from pockets.geometry import Vec2

Color8 = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex:
    """A strip vertex: position, 8-bit RGBA color and texture coordinate."""

    position: Vec2 = Vec2()
    color: Color8 = (255, 255, 255, 255)
    tex_coord: Vec2 = Vec2()


class TriangleRenderable(ABC):
    """Something that supplies vertices for a triangle strip."""

    _triangle_host: Optional["TriangleRenderer"] = None
    layer: int = 0

    @abstractmethod
    def vertices(self) -> List[Vertex]:
        """Vertices in triangle-strip order."""

    def detach(self) -> None:
        """Leave the triangle renderer this object belongs to, if any."""
        if self._triangle_host is not None:
            self._triangle_host.remove(self)
        parent_detach = getattr(super(), "detach", None)
        if parent_detach is not None:
            parent_detach()


def _by_layer(renderable: TriangleRenderable) -> int:
    return renderable.layer


class TriangleRenderer:
    """Joins the strips of its contents with degenerate triangles."""

    def __init__(self) -> None:
        self._renderables: List[TriangleRenderable] = []
        self.strip: List[Vertex] = []

    def __iter__(self) -> Iterator[TriangleRenderable]:
        return iter(list(self._renderables))

    def __len__(self) -> int:
        return len(self._renderables)

    def __contains__(self, renderable: object) -> bool:
        return any(r is renderable for r in self._renderables)

    def add(self, renderable: TriangleRenderable) -> None:
        """Add an element, taking it from any previous renderer."""
        if renderable._triangle_host is not None:
            renderable._triangle_host.remove(renderable)
        self._renderables.append(renderable)
        renderable._triangle_host = self

    def remove(self, renderable: TriangleRenderable) -> None:
        self._renderables = [r for r in self._renderables if r is not renderable]
        renderable._triangle_host = None

    def clear(self) -> None:
        """Disown every element."""
        for renderable in self._renderables:
            renderable._triangle_host = None
        self._renderables = []

    def sort(self, key: Callable[[TriangleRenderable], object] = _by_layer) -> None:
        """Stable sort of the contents; by ascending layer unless ``key`` is given."""
        self._renderables.sort(key=key)

    def render(self) -> List[Vertex]:
        """Assemble and return the combined triangle strip."""
        strip: List[Vertex] = []
        previous: List[Vertex] = []
        for renderable in self._renderables:
            current = list(renderable.vertices())
            if previous and current:
                strip.append(previous[-1])
                strip.append(current[0])
            strip.extend(current)
            previous = current
        self.strip = strip
        return strip