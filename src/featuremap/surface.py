"""Pillow-backed drawing surface with a small cairo-like path API.

Glyphs, tracks and the ruler never touch Pillow directly; they build paths on a
``DrawingContext`` and fill or stroke them. A context is a translated view onto one
``Surface``, so a glyph can draw at row-local coordinates.
"""
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from .errors import ResourceError
from .styles import BACKGROUND, COLOURS, RGB

Point = Tuple[float, float]

NORTH = "north"
SOUTH = "south"
LEFT = "left"
RIGHT = "right"


class Surface:
    """An exclusively owned RGB raster; release it with ``close()`` or a ``with`` block"""

    def __init__(self, width: int, height: int, background: RGB = BACKGROUND):
        if width <= 0 or height <= 0:
            raise ResourceError(f"Cannot allocate a {width}x{height} surface")
        try:
            self.image = Image.new("RGB", (width, height), background)
        except (MemoryError, ValueError) as e:
            raise ResourceError(f"Cannot allocate a {width}x{height} surface: {e}") from e
        self.width = width
        self.height = height
        self.background = background
        self._draw = ImageDraw.Draw(self.image)

    def __enter__(self) -> "Surface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self.image is None

    def close(self) -> None:
        if self.image is not None:
            self.image.close()
            self.image = None
            self._draw = None

    def context(self, dx: float = 0, dy: float = 0, colour: RGB = COLOURS["black"], image_map=None) -> "DrawingContext":
        return DrawingContext(self, dx, dy, colour, image_map)

    def copy_from(self, other: "Surface", width: int, height: int) -> None:
        """Copy the top-left width x height region of another surface onto this one"""
        w = min(width, other.width, self.width)
        h = min(height, other.height, self.height)
        region = other.image.crop((0, 0, w, h))
        try:
            self.image.paste(region, (0, 0))
        finally:
            region.close()

    def save(self, target, format: Optional[str] = None) -> None:
        try:
            self.image.save(target, format=format)
        except (OSError, ValueError, KeyError) as e:
            raise ResourceError(f"Failed to write image to {target!r}: {e}") from e


class DrawingContext:
    """Path construction and painting, translated by (dx, dy) onto a surface"""

    def __init__(self, surface: Surface, dx: float = 0, dy: float = 0, colour: RGB = COLOURS["black"], image_map=None):
        self.surface = surface
        self.dx = dx
        self.dy = dy
        self.colour = colour
        self.line_width = 1
        self.image_map = image_map
        self._subpaths: List[Tuple[List[Point], bool]] = []
        self._current: Optional[Point] = None

    def translate(self, dx: float, dy: float) -> "DrawingContext":
        ctx = DrawingContext(self.surface, self.dx + dx, self.dy + dy, self.colour, self.image_map)
        ctx.line_width = self.line_width
        return ctx

    def set_source_rgb(self, colour: RGB) -> "DrawingContext":
        self.colour = colour
        return self

    def has_path(self) -> bool:
        return bool(self._subpaths)

    def move_to(self, x: float, y: float) -> "DrawingContext":
        self._subpaths.append(([(x, y)], False))
        self._current = (x, y)
        return self

    def line_to(self, x: float, y: float) -> "DrawingContext":
        if self._current is None or not self._subpaths or self._subpaths[-1][1]:
            return self.move_to(x, y)
        self._subpaths[-1][0].append((x, y))
        self._current = (x, y)
        return self

    def rel_line_to(self, dx: float, dy: float) -> "DrawingContext":
        if self._current is None:
            raise ValueError("rel_line_to needs a current point")
        return self.line_to(self._current[0] + dx, self._current[1] + dy)

    def rectangle(self, x: float, y: float, width: float, height: float) -> "DrawingContext":
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        return self.close_path()

    def close_path(self) -> "DrawingContext":
        if self._subpaths and not self._subpaths[-1][1]:
            points, _ = self._subpaths[-1]
            self._subpaths[-1] = (points, True)
            self._current = points[0]
        return self

    def arrow(self, direction: str, x: float, y: float, size: float) -> "DrawingContext":
        """Add a closed triangular arrow head path whose tip sits at (x, y) or (x, y + size)"""
        if direction == NORTH:
            self.move_to(x - size, y + size)
            self.rel_line_to(size, -size)
            self.rel_line_to(size, size)
        elif direction == SOUTH:
            self.move_to(x - size, y)
            self.rel_line_to(size, size)
            self.rel_line_to(size, -size)
        elif direction == RIGHT:
            self.move_to(x, y)
            self.rel_line_to(size, size)
            self.rel_line_to(-size, size)
        elif direction == LEFT:
            self.move_to(x, y)
            self.rel_line_to(-size, size)
            self.rel_line_to(size, size)
        else:
            raise ValueError(f"Unknown arrow direction: {direction!r}")
        return self.close_path()

    def _absolute(self, points: List[Point]) -> List[Point]:
        return [(px + self.dx, py + self.dy) for px, py in points]

    def fill(self, preserve: bool = False) -> "DrawingContext":
        for points, _ in self._subpaths:
            pts = self._absolute(points)
            if len(pts) >= 3:
                self.surface._draw.polygon(pts, fill=self.colour)
            elif len(pts) == 2:
                self.surface._draw.line(pts, fill=self.colour, width=self.line_width)
        if not preserve:
            self._clear()
        return self

    def stroke(self, preserve: bool = False) -> "DrawingContext":
        for points, closed in self._subpaths:
            pts = self._absolute(points)
            if closed and len(pts) > 2:
                pts.append(pts[0])
            if len(pts) >= 2:
                self.surface._draw.line(pts, fill=self.colour, width=self.line_width)
        if not preserve:
            self._clear()
        return self

    def text(self, x: float, y: float, s: str, font=None) -> "DrawingContext":
        self.surface._draw.text((x + self.dx, y + self.dy), s, fill=self.colour, font=font)
        return self

    def _clear(self) -> None:
        self._subpaths = []
        self._current = None
