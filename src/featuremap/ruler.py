from typing import List

from .styles import load_font, to_rgb
from .surface import Surface

TICK_HEIGHT = 5


class Ruler:
    """Coordinate axis drawn across the top of a panel"""

    def __init__(self, panel, colour="black"):
        self.panel = panel
        self.config = panel.config
        self.colour = to_rgb(colour)
        self.tick_height = TICK_HEIGHT
        self.height = self.config.ruler_text_height + 2 * self.tick_height + 5
        self.minor_ticks_distance = self._minor_ticks_distance()
        self.major_ticks_distance = self.minor_ticks_distance * 10

    def _minor_ticks_distance(self) -> int:
        # Smallest power of ten whose ticks are at least the minimum pixel distance apart
        distance = 1
        while distance / self.panel.rescale_factor < self.config.ruler_min_distance_ticks_pixel:
            distance *= 10
        return distance

    def _ticks(self, step: int) -> List[int]:
        first = -(-self.panel.display_start // step) * step
        return list(range(first, self.panel.display_stop + 1, step))

    def minor_ticks(self) -> List[int]:
        return self._ticks(self.minor_ticks_distance)

    def major_ticks(self) -> List[int]:
        return self._ticks(self.major_ticks_distance)

    def draw(self, surface: Surface, vertical_offset: int) -> None:
        ctx = surface.context(0, vertical_offset, self.colour)
        baseline = self.tick_height
        ctx.move_to(0, baseline).line_to(self.panel.width, baseline).stroke()
        for pos in self.minor_ticks():
            x = self.panel.to_pixel(pos)
            ctx.move_to(x, baseline).line_to(x, baseline + self.tick_height)
        ctx.stroke()
        font = load_font(self.config.ruler_text_height, self.config.font)
        for pos in self.major_ticks():
            x = self.panel.to_pixel(pos)
            ctx.move_to(x, baseline).line_to(x, baseline + 2 * self.tick_height)
            ctx.text(x + 2, baseline + self.tick_height, str(pos), font)
        ctx.stroke()
