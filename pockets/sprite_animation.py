"""Frame-by-frame animation of sprites taken from a sheet."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple, Union

from pockets.geometry import Rect, Vec2
from pockets.locus import Locus2d
from pockets.sprite import SpriteData
from pockets.sprite_sheet import Quad


@dataclass
class Drawing:
    """A frame of animation: the sprite shown and how many frames it is held."""

    sprite: SpriteData
    hold: float


def _quad_for(sprite: SpriteData) -> Quad:
    positions = Rect.from_size(sprite.size) - sprite.registration_point
    return Quad(positions, sprite.texture_bounds)


class SpriteAnimation:
    """A sequence of sprites shown in turn as time advances.

    Frames are held for a number of frames at the animation's frame rate
    (24 by default). Looping is on by default.
    """

    def __init__(self) -> None:
        self._locus = Locus2d()
        self._data: List[Drawing] = []
        self._current_index = 0
        self._hold = 0.0
        self._frame_duration = 1.0 / 24.0
        self._looping = True
        self._quad = Quad(Rect(), Rect())

    @property
    def locus(self) -> Locus2d:
        """Screen position and orientation of the animation."""
        return self._locus

    @property
    def frame_duration(self) -> float:
        return self._frame_duration

    @property
    def looping(self) -> bool:
        return self._looping

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def quad(self) -> Quad:
        """Local position and texture rectangles of the current frame."""
        return self._quad

    def __len__(self) -> int:
        return len(self._data)

    def load_animation_json(self, data: Union[Mapping[str, Any], str, bytes], sheet) -> None:
        """Load frames from ``{"fps": n, "frames": [["id", held_frames], ...]}``.

        Sprites are looked up by id in ``sheet``.
        """
        if isinstance(data, (str, bytes)):
            data = json.loads(data)
        try:
            self.set_frame_rate(float(data["fps"]))
            for frame in data["frames"]:
                self.add_frame(sheet.sprite_data(frame[0]), float(frame[1]))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ValueError(f"malformed animation description: {exc!r}") from exc

    def set_frame_rate(self, frames_per_second: float) -> "SpriteAnimation":
        """Set the frame rate of the whole animation."""
        if frames_per_second == 0:
            raise ValueError("frame rate must be non-zero")
        self._frame_duration = 1.0 / frames_per_second
        return self

    def add_frame(self, sprite: SpriteData, hold: float) -> "SpriteAnimation":
        """Append a frame held for ``hold`` frames; returns self for chaining."""
        self._data.append(Drawing(sprite, hold))
        if len(self._data) == 1:
            self._update_graphics()
        return self

    def step(self, delta_time: float) -> None:
        """Advance (or rewind, with a negative delta) the animation in time."""
        self._hold += delta_time
        if self._hold > self._frame_duration * self.current_data().hold:
            self._step_frame(1)
            self._hold = 0.0
        elif self._hold < 0.0:
            self._step_frame(-1)
            self._hold = self._frame_duration * self.current_data().hold

    def set_looping(self, do_loop: bool) -> None:
        self._looping = do_loop

    def current_data(self) -> Drawing:
        """The frame currently shown; raises IndexError when there are none."""
        if not self._data:
            raise IndexError("animation has no frames")
        return self._data[self._current_index]

    def size(self) -> Vec2:
        """Pixel size of the current frame's sprite."""
        return self.current_data().sprite.size

    def render(self) -> List[Tuple[Vec2, Vec2]]:
        """World-space positions and texture coordinates of the current frame."""
        matrix = self._locus.transform()
        return [(matrix.transform_point(p), t) for p, t in self._quad.strip()]

    def _step_frame(self, frames: int) -> None:
        count = len(self._data)
        nxt = self._current_index + frames
        if nxt >= count:
            nxt = 0 if self._looping else count - 1
        elif nxt < 0:
            nxt = count - 1 if self._looping else 0
        if nxt != self._current_index:
            self._current_index = nxt
            self._update_graphics()

    def _update_graphics(self) -> None:
        self._quad = _quad_for(self.current_data().sprite)