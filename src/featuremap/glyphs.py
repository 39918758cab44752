"""Glyphs: the shapes features are drawn with.

Every variant answers the same three questions: the leftmost pixel it touches, the
rightmost pixel it touches, and how to draw itself on a row-local ``DrawingContext``
whose origin is the top-left corner of the feature's row. Tracks use the pixel
extents for row packing, label placement and image-map areas.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Type

from .errors import ConfigurationError, ShapePreconditionError
from .feature import Feature, PixelRange
from .styles import DEFAULT_LAYOUT, LayoutConfig
from .surface import NORTH, DrawingContext


class GlyphKind(Enum):
    GENERIC = "generic"
    DIRECTED_GENERIC = "directed_generic"
    SPLICED = "spliced"
    DIRECTED_SPLICED = "directed_spliced"
    TRIANGLE = "triangle"

    @classmethod
    def resolve(cls, value) -> "GlyphKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ConfigurationError(f"Unknown glyph {value!r}, expected one of: {choices}") from None


class Glyph(ABC):
    clickable = True

    def __init__(self, feature: Feature, ranges: List[PixelRange], context: DrawingContext,
                 config: LayoutConfig = DEFAULT_LAYOUT):
        self.feature = feature
        self.ranges = ranges
        self.context = context
        self.config = config

    @abstractmethod
    def left_pixel(self) -> int:
        ...

    @abstractmethod
    def right_pixel(self) -> int:
        ...

    @abstractmethod
    def draw(self) -> None:
        ...

    def register_area(self) -> None:
        """Record this glyph's box in the context's image map, if there is one"""
        image_map = self.context.image_map
        if image_map is None or not self.clickable:
            return
        top = int(self.context.dy)
        image_map.add_area(self.left_pixel(), top, self.right_pixel(),
                           top + self.config.feature_height, self.feature.link)


class GenericGlyph(Glyph):
    def left_pixel(self) -> int:
        return self.ranges[0].lend

    def right_pixel(self) -> int:
        return self.ranges[-1].rend

    def draw(self) -> None:
        left = self.left_pixel()
        width = max(1, self.right_pixel() - left)
        self.context.rectangle(left, 0, width, self.config.feature_height).fill()


def _head(context: DrawingContext, strand: str, x: int, height: int, length: int) -> None:
    """Fill an arrow head pointing along the strand with its base on x"""
    context.move_to(x, 0)
    if strand == "+":
        context.line_to(x + length, height / 2)
    else:
        context.line_to(x - length, height / 2)
    context.line_to(x, height)
    context.close_path().fill()


class DirectedGenericGlyph(GenericGlyph):
    """Rectangle with an arrow head on the side the feature's strand points to"""

    def _forward_head(self) -> bool:
        return self.feature.strand == "+" and not self.feature.chopped_at_stop

    def _reverse_head(self) -> bool:
        return self.feature.strand == "-" and not self.feature.chopped_at_start

    def left_pixel(self) -> int:
        left = self.ranges[0].lend
        if self._reverse_head():
            left -= self.config.feature_arrow_length
        return left

    def right_pixel(self) -> int:
        right = self.ranges[-1].rend
        if self._forward_head():
            right += self.config.feature_arrow_length
        return right

    def draw(self) -> None:
        h = self.config.feature_height
        lend = self.ranges[0].lend
        rend = self.ranges[-1].rend
        self.context.rectangle(lend, 0, max(1, rend - lend), h).fill()
        if self._forward_head():
            _head(self.context, "+", rend, h, self.config.feature_arrow_length)
        elif self._reverse_head():
            _head(self.context, "-", lend, h, self.config.feature_arrow_length)


class SplicedGlyph(GenericGlyph):
    """One block per location, joined by bent connector lines"""

    def _blocks(self) -> None:
        h = self.config.feature_height
        for r in self.ranges:
            self.context.rectangle(r.lend, 0, max(1, r.rend - r.lend), h)
        self.context.fill()
        for prev, nxt in zip(self.ranges, self.ranges[1:]):
            if nxt.lend <= prev.rend:
                continue
            self.context.move_to(prev.rend, h / 2)
            self.context.line_to((prev.rend + nxt.lend) / 2, 0)
            self.context.line_to(nxt.lend, h / 2)
        self.context.stroke()

    def draw(self) -> None:
        self._blocks()


class DirectedSplicedGlyph(DirectedGenericGlyph, SplicedGlyph):
    def draw(self) -> None:
        self._blocks()
        h = self.config.feature_height
        if self._forward_head():
            _head(self.context, "+", self.ranges[-1].rend, h, self.config.feature_arrow_length)
        elif self._reverse_head():
            _head(self.context, "-", self.ranges[0].lend, h, self.config.feature_arrow_length)


class TriangleGlyph(Glyph):
    """A north-pointing arrow marking a single position (e.g. a SNP).

    Both extents are widened by the arrow length so that row packing keeps
    neighbouring point features apart although the feature itself has no width.
    """

    def left_pixel(self) -> int:
        return self.ranges[0].lend - self.config.feature_arrow_length

    def right_pixel(self) -> int:
        return self.ranges[0].rend + self.config.feature_arrow_length

    def draw(self) -> None:
        if self.feature.start != self.feature.stop:
            raise ShapePreconditionError(
                "Start and stop are not the same; triangle glyphs require a point feature "
                f"({self.feature.name!r}: {self.feature.start}..{self.feature.stop})")
        length = self.config.feature_arrow_length
        self.context.arrow(NORTH, self.left_pixel() + length, 0, length)
        self.context.fill(preserve=True)
        self.context.close_path().stroke()


GLYPHS = {
    GlyphKind.GENERIC: GenericGlyph,
    GlyphKind.DIRECTED_GENERIC: DirectedGenericGlyph,
    GlyphKind.SPLICED: SplicedGlyph,
    GlyphKind.DIRECTED_SPLICED: DirectedSplicedGlyph,
    GlyphKind.TRIANGLE: TriangleGlyph,
}


def glyph_class(kind) -> Type[Glyph]:
    return GLYPHS[GlyphKind.resolve(kind)]
