"""Circular clickable "dot" widget, independent of any GUI toolkit.

The host toolkit owns layout, event delivery and rendering.  A ``Dot`` only
answers three questions: how big am I, did this event hit me, and what
should be drawn.  Dots are cheap values rebuilt from application state on
every render; the only mutable bit is the transient ``hovered`` flag.
"""

import enum
import struct
from typing import Generic, NamedTuple, TypeVar

from theme import BLACK, Color

Message = TypeVar("Message")

# Fraction of the radius used as border width while hovered
HOVER_BORDER_RATIO = 0.2


class Point(NamedTuple):
    x: float
    y: float


class Size(NamedTuple):
    width: float
    height: float


class Rectangle(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Inclusive on all four edges."""
        return (self.x <= point.x <= self.x + self.width
                and self.y <= point.y <= self.y + self.height)


class Length(enum.Enum):
    SHRINK = "shrink"
    FILL = "fill"


class Status(enum.Enum):
    IGNORED = "ignored"
    CAPTURED = "captured"


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class EventKind(enum.Enum):
    CURSOR_MOVED = "cursor_moved"
    CURSOR_LEFT = "cursor_left"
    BUTTON_PRESSED = "button_pressed"
    BUTTON_RELEASED = "button_released"
    WHEEL_SCROLLED = "wheel_scrolled"


class Event(NamedTuple):
    kind: EventKind
    button: MouseButton | None = None


CURSOR_MOVED = Event(EventKind.CURSOR_MOVED)
CURSOR_LEFT = Event(EventKind.CURSOR_LEFT)


def button_pressed(button: MouseButton = MouseButton.LEFT) -> Event:
    return Event(EventKind.BUTTON_PRESSED, button)


def button_released(button: MouseButton = MouseButton.LEFT) -> Event:
    return Event(EventKind.BUTTON_RELEASED, button)


class Quad(NamedTuple):
    """Filled, optionally stroked rounded rectangle (a circle here)."""

    bounds: Rectangle
    background: Color
    border_radius: float
    border_width: float
    border_color: Color


class Dot(Generic[Message]):
    """Fixed-size circle that emits ``on_press`` when clicked."""

    __slots__ = ("radius", "color", "on_press", "hovered")

    def __init__(self, radius: float, color: Color, on_press: Message) -> None:
        self.radius = radius
        self.color = color
        self.on_press = on_press
        self.hovered = False

    def __repr__(self) -> str:
        return (f"Dot(radius={self.radius!r}, color={self.color!r}, "
                f"on_press={self.on_press!r}, hovered={self.hovered!r})")

    @property
    def width(self) -> Length:
        return Length.SHRINK

    @property
    def height(self) -> Length:
        return Length.SHRINK

    def layout(self, limits: Size | None = None) -> Size:
        """Intrinsic size; available space is ignored."""
        return Size(self.radius * 2.0, self.radius * 2.0)

    def on_event(self, event: Event, bounds: Rectangle, cursor_position: Point,
                 messages: list[Message]) -> Status:
        inside = bounds.contains(cursor_position)
        # Hover follows the bounding box, not the circle itself
        self.hovered = inside
        if (event.kind is EventKind.BUTTON_PRESSED
                and event.button is MouseButton.LEFT and inside):
            messages.append(self.on_press)
            return Status.CAPTURED
        # hovering alone never captures
        return Status.IGNORED

    def draw(self, bounds: Rectangle) -> Quad:
        border_width = self.radius * HOVER_BORDER_RATIO if self.hovered else 0.0
        return Quad(
            bounds=bounds,
            background=self.color,
            border_radius=self.radius,
            border_width=border_width,
            border_color=BLACK,
        )

    def hash_layout(self) -> int:
        radius_bits = struct.unpack("<I", struct.pack("<f", self.radius))[0]
        color = tuple(int(c) for c in self.color.into_linear())
        return hash((radius_bits, self.hovered, color))
