"""Colours and the two hard-coded palettes (dark / light)."""

from dataclasses import dataclass
from typing import NamedTuple


class Color(NamedTuple):
    """RGBA colour, components in 0..1 (sRGB)."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls(r, g, b, 1.0)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, a: float = 1.0) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, a)

    def with_alpha(self, a: float) -> "Color":
        return self._replace(a=a)

    def into_linear(self) -> tuple[float, float, float, float]:
        """Return (r, g, b, a) with the sRGB transfer curve removed."""

        def linear(c: float) -> float:
            if c <= 0.04045:
                return c / 12.92
            return ((c + 0.055) / 1.055) ** 2.4

        return linear(self.r), linear(self.g), linear(self.b), self.a

    def over(self, background: "Color") -> "Color":
        """Composite onto an opaque background (tkinter has no alpha)."""
        a = self.a
        return Color(
            self.r * a + background.r * (1.0 - a),
            self.g * a + background.g * (1.0 - a),
            self.b * a + background.b * (1.0 - a),
            1.0,
        )

    def to_hex(self) -> str:
        def byte(c: float) -> int:
            return max(0, min(255, round(c * 255)))

        return f"#{byte(self.r):02x}{byte(self.g):02x}{byte(self.b):02x}"


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


class Scrollbar(NamedTuple):
    background: Color
    scroller: Color


SCROLLBAR_STATES = ("active", "hovered", "dragging")


@dataclass(frozen=True)
class Palette:
    name: str
    background: Color
    text: Color
    surface: Color
    scroller: Color
    scroller_hovered: Color
    scroller_dragging: Color

    def scrollbar(self, state: str = "active") -> Scrollbar:
        """Scrollbar colours for one of the three visual variants.

        ``hovered`` is derived from ``active`` (half-transparent track) and
        ``dragging`` from ``hovered`` (only the scroller changes), so the
        track colour is already flattened onto the container background.
        """
        if state not in SCROLLBAR_STATES:
            raise ValueError(f"unknown scrollbar state: {state!r}")
        active = Scrollbar(self.surface, self.scroller)
        if state == "active":
            return active
        hovered = active._replace(
            background=self.surface.with_alpha(0.5).over(self.background),
            scroller=self.scroller_hovered,
        )
        if state == "hovered":
            return hovered
        return hovered._replace(scroller=self.scroller_dragging)


DARK = Palette(
    name="dark",
    background=Color.from_rgb8(0x36, 0x39, 0x3F),
    text=WHITE,
    surface=Color.from_rgb8(0x40, 0x44, 0x4B),
    scroller=Color.from_rgb8(0x72, 0x89, 0xDA),
    scroller_hovered=Color.from_rgb8(0x67, 0x7B, 0xC4),
    scroller_dragging=Color.from_rgb(0.85, 0.85, 0.85),
)

LIGHT = Palette(
    name="light",
    background=Color.from_rgb8(0xF3, 0xF3, 0xF3),
    text=Color.from_rgb8(0x33, 0x33, 0x33),
    surface=Color.from_rgb8(0xDD, 0xDD, 0xDD),
    scroller=Color.from_rgb8(0x00, 0x78, 0xD4),
    scroller_hovered=Color.from_rgb8(0x00, 0x6C, 0xBE),
    scroller_dragging=Color.from_rgb8(0x00, 0x5A, 0x9E),
)


def palette_for(dark_mode: bool) -> Palette:
    return DARK if dark_mode else LIGHT
