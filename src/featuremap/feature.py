from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import ConfigurationError


@dataclass
class Location:
    """A logical interval, 1-based and closed"""
    start: int
    stop: int


@dataclass
class PixelRange:
    lend: int
    rend: int


@dataclass
class Feature:
    """One thing drawn on a track, e.g. a gene (with exon locations) or a SNP"""
    name: str
    start: int
    stop: int
    locations: List[Location] = field(default_factory=list)
    strand: Optional[str] = None  # + or -
    link: Optional[str] = None
    colour: Optional[Tuple[int, int, int]] = None
    chopped_at_start: bool = False
    chopped_at_stop: bool = False

    def __post_init__(self):
        self.start = int(self.start)
        self.stop = int(self.stop)
        if self.stop < self.start:
            raise ConfigurationError(
                f"Feature {self.name!r}: stop ({self.stop}) is smaller than start ({self.start})")
        if self.strand not in (None, "+", "-"):
            raise ConfigurationError(f"Feature {self.name!r}: strand must be '+', '-' or None")
        if not self.locations:
            self.locations = [Location(self.start, self.stop)]
        for loc in self.locations:
            if loc.stop < loc.start or loc.start < self.start or loc.stop > self.stop:
                raise ConfigurationError(
                    f"Feature {self.name!r}: location {loc.start}..{loc.stop} is inverted or outside {self.start}..{self.stop}")
        self.locations.sort(key=lambda l: l.start)

    @property
    def is_point(self) -> bool:
        return self.start == self.stop

    def pixel_ranges(self, panel) -> List[PixelRange]:
        """Clip locations to the panel display window and rescale them to pixels.

        Locations entirely outside the window are dropped; ``chopped_at_start`` and
        ``chopped_at_stop`` record whether the visible part was cut.
        """
        self.chopped_at_start = False
        self.chopped_at_stop = False
        ranges: List[PixelRange] = []
        for loc in self.locations:
            if loc.stop < panel.display_start or loc.start > panel.display_stop:
                continue
            start = loc.start
            stop = loc.stop
            if start < panel.display_start:
                start = panel.display_start
                self.chopped_at_start = True
            if stop > panel.display_stop:
                stop = panel.display_stop
                self.chopped_at_stop = True
            ranges.append(PixelRange(int(round(panel.to_pixel(start))), int(round(panel.to_pixel(stop)))))
        return ranges
