# pockets

Small building blocks for 2D sprite-based graphics:

- `pockets.geometry` — `Vec2`, `Rect` and `Affine2` value types.
- `pockets.animation` — `lerp`, `quantize`, `wrap_lerp`, `lerp_hsva` and quaternion slerp via `Quaternion` and `lerp_quaternion`.
- `pockets.locus` — `Locus2d`, a nestable position and rotation whose transform includes its parent's.
- `pockets.sprite`, `pockets.sprite_sheet`, `pockets.sprite_animation` — sprite data, sheets loaded from a PNG with a JSON description, and frame-based animation.
- `pockets.simple_renderer`, `pockets.triangle_renderer` — ordered, layer-sortable collections of renderables.
- `pockets.expanded_line` — a line drawn as a textured triangle strip that can be scaled along its length.
- `pockets.image_packer` — packs images into a single sheet and writes its JSON description.
- `pockets.line_utils` — smooth Bézier control points through a set of points, and arc-length reparameterisation.
- `pockets.messenger` — a small message-passing pair, `Messenger` and `Receiver`.
- `pockets.collection_utils`, `pockets.file_utils`, `pockets.color_palette` — helpers.

## Install

```
pip install .
```

## Example: packing a sprite sheet

```python
from PIL import Image
from pockets.geometry import Vec2
from pockets.image_packer import ImagePacker

packer = ImagePacker()
packer.add_image("red", Image.new("RGBA", (16, 16), (255, 0, 0, 255)), False)
packer.add_image("blue", Image.new("RGBA", (8, 24), (0, 0, 255, 255)), False)
packer.calculate_positions(Vec2(2, 2), 256)

sheet = packer.packed_surface(False)
description = packer.surface_description()
```

The saved sheet and description can be read back with `SpriteSheet.load`, and
individual sprites taken from it with `SpriteSheet.sprite`.

## Tests

```
pip install .[test]
pytest
```