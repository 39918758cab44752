"""The panel: ruler plus stacked tracks on one linear coordinate axis.

A panel covers ``length`` logical units (base pairs, centimorgans, ...) and renders
the display window ``display_start..display_stop`` into ``width`` pixels.

Drawing happens in two passes. The final height depends on how many rows every
track packs its features into, which is only known once each track has laid
itself out, so everything is first drawn onto a scratch surface much taller than
needed and the used top part is then copied onto a surface of the exact size.

    panel = Panel(1000)
    genes = panel.add_track("genes")
    genes.add_feature("gene1", 250, 375)
    snps = panel.add_track("snps", colour="red", glyph="triangle")
    snps.add_feature("snp1", 500)
    panel.draw("map.png")
"""
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import ConfigurationError, ResourceError
from .glyphs import GlyphKind
from .image_map import ImageMap, write_html_document
from .ruler import Ruler
from .styles import DEFAULT_LAYOUT, LayoutConfig
from .surface import Surface
from .track import Track


@dataclass
class Composition:
    """What laying out the ruler and tracks produced"""
    ruler_height: int
    feature_rows: int
    track_count: int
    height: int
    image_map: Optional[ImageMap] = None


class Panel:
    def __init__(
        self,
        length: int,
        width: Optional[int] = None,
        clickable: bool = False,
        display_start: Optional[int] = None,
        display_stop: Optional[int] = None,
        config: LayoutConfig = DEFAULT_LAYOUT,
    ):
        self.config = config
        self.length = _positive_int(length, "length")
        self.width = _positive_int(config.default_panel_width if width is None else width, "width")
        self.clickable = bool(clickable)
        self.tracks: List[Track] = []
        self.number_of_feature_rows = 0
        self.height: Optional[int] = None

        self.display_start = 0 if display_start is None or display_start < 0 else int(display_start)
        self.display_stop = self.length if display_stop is None or display_stop > self.length else int(display_stop)
        if self.display_stop <= self.display_start:
            raise ConfigurationError(
                f"Display start ({self.display_start}) has to be smaller than display stop ({self.display_stop})")
        self._rescale_factor = (self.display_stop - self.display_start) / float(self.width)

    @property
    def rescale_factor(self) -> float:
        """Logical units per pixel"""
        return self._rescale_factor

    def to_pixel(self, x: float) -> float:
        return (x - self.display_start) / self._rescale_factor

    def add_track(self, name: str, label: bool = True, colour="blue", glyph=GlyphKind.GENERIC) -> Track:
        track = Track(self, name, label, colour, glyph)
        self.tracks.append(track)
        return track

    def compose(self, surface: Surface) -> Composition:
        """Draw the ruler and every track top to bottom onto surface"""
        image_map = ImageMap() if self.clickable else None
        vertical_offset = 0
        ruler = Ruler(self)
        ruler.draw(surface, vertical_offset)
        vertical_offset += ruler.height

        feature_rows = 0
        for track in self.tracks:
            track.set_vertical_offset(vertical_offset)
            track.draw(surface, image_map)
            feature_rows += track.row_count
            vertical_offset += track.row_count * self.config.row_pitch + self.config.track_header_band

        height = (ruler.height
                  + feature_rows * self.config.row_pitch
                  + len(self.tracks) * self.config.track_header_band)
        return Composition(ruler.height, feature_rows, len(self.tracks), height, image_map)

    def scratch_height(self) -> int:
        """Height of the oversized surface: the configured one, or more when
        every feature could end up on a row of its own"""
        bound = Ruler(self).height + sum(
            self.config.track_header_band + len(track.features) * self.config.row_pitch
            for track in self.tracks)
        return max(self.config.scratch_height, bound)

    def render(self) -> Tuple[Surface, Composition]:
        """Lay out and draw the panel; the caller owns (and must close) the returned surface"""
        with Surface(self.width, self.scratch_height()) as scratch:
            composition = self.compose(scratch)
            final = Surface(self.width, composition.height)
            try:
                final.copy_from(scratch, self.width, composition.height)
            except BaseException:
                final.close()
                raise
        return final, composition

    def draw(self, file_name: str) -> Composition:
        """Write the panel as an image, plus an HTML page with the image map when clickable"""
        final, composition = self.render()
        with final:
            final.save(file_name)
        self.number_of_feature_rows = composition.feature_rows
        self.height = composition.height

        if self.clickable:
            html_file_name = os.path.splitext(file_name)[0] + ".html"
            try:
                write_html_document(html_file_name, composition.image_map, os.path.basename(file_name))
            except OSError as e:
                raise ResourceError(f"Failed to write image map to {html_file_name!r}: {e}") from e
        return composition


def _positive_int(value, what: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{what} must be an integer, got {value!r}") from None
    if n <= 0:
        raise ConfigurationError(f"{what} must be positive, got {n}")
    return n
