"""Ordered rendering of a group of renderable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional


class Renderable(ABC):
    """Something a :class:`SimpleRenderer` can draw.

    A renderable belongs to at most one renderer; adding it to another moves it.
    """

    _simple_host: Optional["SimpleRenderer"] = None
    layer: int = 0

    @abstractmethod
    def render(self) -> None:
        """Draw this object."""

    def detach(self) -> None:
        """Leave the renderer this object belongs to, if any."""
        if self._simple_host is not None:
            self._simple_host.remove(self)
        parent_detach = getattr(super(), "detach", None)
        if parent_detach is not None:
            parent_detach()


def layer_key(renderable) -> int:
    """Sort key ordering renderables by ascending layer."""
    return renderable.layer


class SimpleRenderer:
    """Renders its contents in order, between optional pre- and post-draw hooks."""

    def __init__(self) -> None:
        self._renderables: List[Renderable] = []
        self._pre_draw: Optional[Callable[[], None]] = None
        self._post_draw: Optional[Callable[[], None]] = None

    def __iter__(self) -> Iterator[Renderable]:
        return iter(list(self._renderables))

    def __len__(self) -> int:
        return len(self._renderables)

    def __contains__(self, renderable: object) -> bool:
        return any(r is renderable for r in self._renderables)

    def add(self, renderable: Renderable) -> None:
        """Add an element to be rendered, taking it from any previous renderer."""
        if renderable._simple_host is not None:
            renderable._simple_host.remove(renderable)
        self._renderables.append(renderable)
        renderable._simple_host = self

    def remove(self, renderable: Renderable) -> None:
        """Stop rendering an element."""
        self._renderables = [r for r in self._renderables if r is not renderable]
        renderable._simple_host = None

    def clear(self) -> None:
        """Disown every element."""
        for renderable in self._renderables:
            renderable._simple_host = None
        self._renderables = []

    def sort(self, key: Callable[[Renderable], object] = layer_key) -> None:
        """Stable sort of the contents; by ascending layer unless ``key`` is given."""
        self._renderables.sort(key=key)

    def render(self) -> None:
        """Draw everything in its current order."""
        if self._pre_draw is not None:
            self._pre_draw()
        for renderable in list(self._renderables):
            renderable.render()
        if self._post_draw is not None:
            self._post_draw()

    def set_pre_draw(self, fn: Optional[Callable[[], None]]) -> None:
        """Function called before rendering."""
        self._pre_draw = fn

    def set_post_draw(self, fn: Optional[Callable[[], None]]) -> None:
        """Function called after rendering."""
        self._post_draw = fn