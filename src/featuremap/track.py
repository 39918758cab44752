import logging
from typing import List, Optional, Sequence, Tuple

from .feature import Feature, Location
from .glyphs import GLYPHS, Glyph, GlyphKind
from .image_map import ImageMap
from .layout import assign_rows, row_count
from .styles import COLOURS, HEADER_LINE_COLOUR, load_font, to_rgb
from .surface import Surface

logger = logging.getLogger(__name__)


class Track:
    """A titled band of features that share a colour and a glyph.

    Features are packed into rows on draw; ``row_count`` is only meaningful
    afterwards.
    """

    def __init__(self, panel, name: str, label: bool = True, colour="blue", glyph=GlyphKind.GENERIC):
        self.panel = panel
        self.config = panel.config
        self.name = name
        self.label = label
        self.colour = to_rgb(colour)
        self.glyph_kind = GlyphKind.resolve(glyph)
        self.glyph_class = GLYPHS[self.glyph_kind]
        self.features: List[Feature] = []
        self.vertical_offset = 0
        self.row_count = 0

    def add_feature(
        self,
        name: str,
        start: int,
        stop: Optional[int] = None,
        locations: Optional[Sequence[Tuple[int, int]]] = None,
        strand: Optional[str] = None,
        link: Optional[str] = None,
        colour=None,
    ) -> Feature:
        if stop is None:
            stop = start
        locs = [Location(int(s), int(e)) for s, e in locations] if locations else []
        feature = Feature(name, start, stop, locs, strand, link, to_rgb(colour) if colour is not None else None)
        self.features.append(feature)
        return feature

    def set_vertical_offset(self, pixels: int) -> None:
        self.vertical_offset = int(pixels)

    def _draw_header(self, surface: Surface) -> None:
        ctx = surface.context(0, self.vertical_offset, HEADER_LINE_COLOUR)
        ctx.move_to(0, 0).line_to(self.panel.width, 0).stroke()
        size = min(self.config.track_header_height, self.config.track_header_band)
        ctx.set_source_rgb(COLOURS["black"])
        ctx.text(2, 0, self.name, load_font(size, self.config.font))

    def draw(self, surface: Surface, image_map: Optional[ImageMap] = None) -> None:
        self._draw_header(surface)
        label_font = load_font(self.config.feature_v_distance + self.config.row_padding - 1, self.config.font)

        glyphs: List[Glyph] = []
        spans: List[Tuple[float, float]] = []
        for feature in sorted(self.features, key=lambda f: f.start):
            ranges = feature.pixel_ranges(self.panel)
            if not ranges:
                logger.debug("Feature %s (%d..%d) lies outside the display window", feature.name, feature.start, feature.stop)
                continue
            glyph = self.glyph_class(feature, ranges, None, self.config)
            right = glyph.right_pixel()
            if self.label:
                right = max(right, glyph.left_pixel() + label_font.getlength(feature.name))
            glyphs.append(glyph)
            spans.append((glyph.left_pixel(), right))

        rows = assign_rows(spans, min_distance=1)
        self.row_count = row_count(rows)
        logger.debug("Track %s: %d features in %d rows", self.name, len(glyphs), self.row_count)

        top = self.vertical_offset + self.config.track_header_band
        base = surface.context(0, top, self.colour, image_map)
        for glyph, row in zip(glyphs, rows):
            glyph.context = base.translate(0, row * self.config.row_pitch)
            glyph.context.set_source_rgb(glyph.feature.colour or self.colour)
            glyph.draw()
            if self.label:
                label = glyph.context.translate(0, 0)
                label.set_source_rgb(COLOURS["black"])
                label.text(glyph.left_pixel(), self.config.feature_height, glyph.feature.name, label_font)
            glyph.register_area()
