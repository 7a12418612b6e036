"""Packing of many small images into a single sprite sheet bitmap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from pockets.geometry import Rect, Vec2
from pockets.sprite_sheet import premultiply as _premultiply

PointLike = Union[Vec2, Sequence[float]]

CREATED_BY = "pockets ImagePacker"


def _as_vec(point: PointLike) -> Vec2:
    return point if isinstance(point, Vec2) else Vec2(*point)


@dataclass(eq=False)
class ImageData:
    """Bitmap of one sprite together with its place on the sheet."""

    surface: Image.Image
    image_id: str
    loc: Vec2 = field(default_factory=Vec2)
    registration_point: Vec2 = field(default_factory=Vec2)

    @property
    def width(self) -> int:
        return self.surface.width

    @property
    def height(self) -> int:
        return self.surface.height

    @property
    def size(self) -> Vec2:
        return Vec2(self.surface.width, self.surface.height)

    def bounds(self) -> Rect:
        """Bounds of the bitmap at the origin."""
        return Rect(0, 0, self.surface.width, self.surface.height)

    def placed_bounds(self) -> Rect:
        """Bounds of the bitmap at its packed location."""
        return self.bounds() + self.loc

    def to_json(self) -> Dict[str, Any]:
        """Description of the sprite in the sheet format."""
        x, y = int(self.loc.x), int(self.loc.y)
        return {
            "id": self.image_id,
            "x1": x,
            "y1": y,
            "x2": x + self.width,
            "y2": y + self.height,
            "rx": int(self.registration_point.x),
            "ry": int(self.registration_point.y),
        }


def _trim_alpha(surface: Image.Image) -> Image.Image:
    rgba = surface.convert("RGBA")
    box = rgba.getchannel("A").getbbox()
    if box is None:
        return Image.new("RGBA", (0, 0), (0, 0, 0, 0))
    return rgba.crop(box)


def _render_text(font: Any, text: str) -> Image.Image:
    left, top, right, bottom = font.getbbox(text)
    size = (max(int(right), 1), max(int(bottom), 1))
    image = Image.new("RGBA", size, (0, 0, 0, 0))
    ImageDraw.Draw(image).text((0, 0), text, font=font, fill=(255, 255, 255, 255))
    return image


class ImagePacker:
    """Places images, tallest first, into one bitmap whose height grows to fit."""

    def __init__(self) -> None:
        self._images: List[ImageData] = []
        self.width = 1024
        self.height = 1

    def __iter__(self) -> Iterator[ImageData]:
        return iter(list(self._images))

    def __len__(self) -> int:
        return len(self._images)

    def add_image(self, image_id: str, surface: Image.Image,
                  trim_alpha: bool = False) -> ImageData:
        """Add an image; with ``trim_alpha`` its bounds shrink to the opaque area."""
        surface = _trim_alpha(surface) if trim_alpha else surface.convert("RGBA")
        data = ImageData(surface, image_id)
        self._images.append(data)
        return data

    def add_string(self, image_id: str, font: Any, text: str,
                   trim_alpha: bool = False) -> ImageData:
        """Add ``text`` set in white in ``font``."""
        return self.add_image(image_id, _render_text(font, text), trim_alpha)

    def add_glyphs(self, font: Any, glyphs: Iterable[str], id_prefix: str = "",
                   trim_alpha: bool = False) -> List[ImageData]:
        """Add each character of ``glyphs``; ids are the prefix plus the character."""
        return [self.add_string(id_prefix + glyph, font, glyph, trim_alpha)
                for glyph in glyphs]

    def _sort_by_height(self) -> None:
        self._images.sort(key=lambda data: data.height, reverse=True)

    def calculate_positions(self, padding: PointLike = Vec2(), width: int = 1024) -> None:
        """Place images row by row, starting a new row when one is full."""
        pad = _as_vec(padding)
        self._sort_by_height()
        x, y = 0, 0
        bottom_y = 0
        for data in self._images:
            if x + data.width > width:
                y = int(bottom_y + pad.y)
                x = 0
            data.loc = Vec2(x, y)
            x += int(data.width + pad.x)
            bottom_y = max(data.height + y, bottom_y)
        self.width = width
        self.height = max(bottom_y, width)

    def calculate_positions_scanline(self, padding: PointLike = Vec2(),
                                     width: int = 1024) -> None:
        """Place each image at the first free spot found scanning pixel rows."""
        pad = _as_vec(padding)
        if not self._images:
            raise IndexError("no images to place")
        self._sort_by_height()
        for data in self._images[1:]:
            if pad.x + data.width >= width - pad.x:
                raise ValueError(f"image {data.image_id!r} is too wide for width {width}")
        self._images[0].loc = Vec2(int(pad.x), int(pad.y))
        bottom_y = 0
        for index, data in enumerate(self._images[1:], start=1):
            placed_before = self._images[:index]
            x, y = int(pad.x), int(pad.y)
            placed = False
            while not placed:
                for other in placed_before:
                    bounds = other.placed_bounds().inflated(pad)
                    if bounds.contains(Vec2(x, y)):
                        x = int(bounds.x2)
                if x + data.width < width - pad.x:
                    data.loc = Vec2(x, y)
                    placed = True
                    # shrink by one, since sharing an edge counts as intersecting
                    potential = data.placed_bounds().inflated(Vec2(-1, -1))
                    for other in placed_before:
                        if potential.intersects(other.placed_bounds().inflated(pad)):
                            placed = False
                    bottom_y = max(data.height + y, bottom_y)
                x = int(pad.x)
                y += 1
        self.width = width
        self.height = max(bottom_y, width)

    def packed_surface(self, premultiply: bool = False) -> Image.Image:
        """A bitmap holding every image at its packed location."""
        output = Image.new("RGBA", (int(self.width), int(self.height)), (0, 0, 0, 0))
        for data in self._images:
            if data.width and data.height:
                output.paste(data.surface, (int(data.loc.x), int(data.loc.y)))
        if premultiply:
            output = _premultiply(output)
        return output

    def surface_description(self) -> Dict[str, Any]:
        """JSON-ready description of the sheet and every image on it."""
        return {
            "meta": {"created_by": CREATED_BY, "width": self.width, "height": self.height},
            "sprites": [data.to_json() for data in self._images],
        }

    def clear(self) -> None:
        """Remove all images."""
        self._images.clear()