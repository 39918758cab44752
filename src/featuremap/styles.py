from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from PIL import ImageFont

from .errors import ConfigurationError


DEFAULT_PANEL_WIDTH = 800  # pixels
TRACK_HEADER_HEIGHT = 12  # font size of the track title
FEATURE_HEIGHT = 10
FEATURE_V_DISTANCE = 5
FEATURE_ARROW_LENGTH = 5
RULER_TEXT_HEIGHT = 10
RULER_MIN_DISTANCE_TICKS_PIXEL = 5
SCRATCH_HEIGHT = 2000  # height of the oversized surface tracks are drawn on
TRACK_HEADER_BAND = 10
ROW_PADDING = 5

FONT_PREFERENCES = ("Georgia.ttf", "DejaVuSans.ttf", "Arial.ttf", "arial.ttf")


COLOURS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "grey": (160, 160, 160),
    "lightgrey": (192, 192, 192),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "brown": (165, 42, 42),
}

BACKGROUND = COLOURS["white"]
HEADER_LINE_COLOUR = (191, 191, 191)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel constants shared by a panel and everything it draws."""
    default_panel_width: int = DEFAULT_PANEL_WIDTH
    track_header_height: int = TRACK_HEADER_HEIGHT
    feature_height: int = FEATURE_HEIGHT
    feature_v_distance: int = FEATURE_V_DISTANCE
    feature_arrow_length: int = FEATURE_ARROW_LENGTH
    ruler_text_height: int = RULER_TEXT_HEIGHT
    ruler_min_distance_ticks_pixel: int = RULER_MIN_DISTANCE_TICKS_PIXEL
    scratch_height: int = SCRATCH_HEIGHT
    track_header_band: int = TRACK_HEADER_BAND
    row_padding: int = ROW_PADDING
    font: Tuple[str, ...] = FONT_PREFERENCES

    @property
    def row_pitch(self) -> int:
        return self.feature_height + self.feature_v_distance + self.row_padding


DEFAULT_LAYOUT = LayoutConfig()


def to_rgb(colour: Union[str, Sequence[float]]) -> RGB:
    """Resolve a colour name, an int RGB triple or a [0, 1] float triple"""
    if isinstance(colour, str):
        try:
            return COLOURS[colour.lower()]
        except KeyError:
            raise ConfigurationError(f"Unknown colour: {colour!r}") from None
    values = tuple(colour)
    if len(values) != 3:
        raise ConfigurationError(f"Colour needs three components: {colour!r}")
    if any(isinstance(v, float) for v in values) or all(0 <= v <= 1 for v in values):
        if not all(0 <= v <= 1 for v in values):
            raise ConfigurationError(f"Unit colour components must lie in [0, 1]: {colour!r}")
        return tuple(int(round(v * 255)) for v in values)
    if not all(0 <= v <= 255 for v in values):
        raise ConfigurationError(f"Colour components out of range: {colour!r}")
    return tuple(int(v) for v in values)


def load_font(size: int, preferences: Sequence[str] = FONT_PREFERENCES):
    for name in preferences:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()
