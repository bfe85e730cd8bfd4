import pytest

from dot import (
    CURSOR_LEFT,
    CURSOR_MOVED,
    Dot,
    Event,
    EventKind,
    Length,
    MouseButton,
    Point,
    Quad,
    Rectangle,
    Size,
    Status,
    button_pressed,
    button_released,
)
from theme import BLACK, Color

RED = Color.from_rgb(1.0, 0.0, 0.0)
GREEN = Color.from_rgb(0.0, 1.0, 0.0)
BOUNDS = Rectangle(10.0, 10.0, 40.0, 40.0)


def make_dot(radius=20.0, color=RED, payload=("msg", 1)):
    return Dot(radius, color, payload)


def test_rectangle_contains_is_inclusive():
    assert BOUNDS.contains(Point(10.0, 10.0))
    assert BOUNDS.contains(Point(50.0, 50.0))
    assert not BOUNDS.contains(Point(9.9, 30.0))
    assert not BOUNDS.contains(Point(30.0, 50.1))


def test_layout_shrinks_to_diameter():
    dot = make_dot(radius=20.0)
    assert dot.width is Length.SHRINK
    assert dot.height is Length.SHRINK
    assert dot.layout() == Size(40.0, 40.0)
    assert dot.layout(Size(1000.0, 1000.0)) == Size(40.0, 40.0)


def test_degenerate_radius_is_not_an_error():
    dot = make_dot(radius=0.0)
    assert dot.layout() == Size(0.0, 0.0)
    assert make_dot(radius=-1.0).layout() == Size(-2.0, -2.0)


def test_starts_not_hovered():
    assert make_dot().hovered is False


@pytest.mark.parametrize("event", [
    CURSOR_MOVED,
    CURSOR_LEFT,
    button_released(),
    button_pressed(MouseButton.RIGHT),
    Event(EventKind.WHEEL_SCROLLED),
])
def test_hover_follows_cursor_for_any_event(event):
    dot = make_dot()
    dot.on_event(event, BOUNDS, Point(30.0, 30.0), [])
    assert dot.hovered is True
    dot.on_event(event, BOUNDS, Point(0.0, 0.0), [])
    assert dot.hovered is False


def test_hover_uses_bounding_box_corners():
    dot = make_dot()
    # outside the circle but inside the box
    dot.on_event(CURSOR_MOVED, BOUNDS, Point(11.0, 11.0), [])
    assert dot.hovered is True


def test_left_press_inside_captures_and_emits_once():
    dot = make_dot(payload=(3, 7))
    messages = []
    status = dot.on_event(button_pressed(), BOUNDS, Point(30.0, 30.0), messages)
    assert status is Status.CAPTURED
    assert messages == [(3, 7)]
    assert dot.hovered is True


def test_left_press_outside_is_ignored():
    dot = make_dot()
    messages = []
    status = dot.on_event(button_pressed(), BOUNDS, Point(100.0, 30.0), messages)
    assert status is Status.IGNORED
    assert messages == []
    assert dot.hovered is False


@pytest.mark.parametrize("event", [
    CURSOR_MOVED,
    button_released(),
    button_pressed(MouseButton.RIGHT),
    button_pressed(MouseButton.MIDDLE),
])
def test_other_events_inside_are_ignored(event):
    dot = make_dot()
    messages = []
    assert dot.on_event(event, BOUNDS, Point(30.0, 30.0), messages) is Status.IGNORED
    assert messages == []


def test_draw_without_hover_has_no_border():
    dot = make_dot(radius=20.0, color=GREEN)
    quad = dot.draw(BOUNDS)
    assert quad == Quad(BOUNDS, GREEN, 20.0, 0.0, BLACK)


def test_draw_hovered_has_proportional_border():
    dot = make_dot(radius=20.0)
    dot.on_event(CURSOR_MOVED, BOUNDS, Point(20.0, 20.0), [])
    quad = dot.draw(BOUNDS)
    assert quad.border_width == pytest.approx(4.0)
    assert quad.border_color == BLACK
    assert quad.border_radius == 20.0
    assert quad.background == RED


def test_hash_equal_for_equal_widgets():
    a = make_dot(payload="a")
    b = make_dot(payload="b")
    assert a.hash_layout() == b.hash_layout()


def test_hash_changes_with_hover():
    dot = make_dot()
    before = dot.hash_layout()
    dot.on_event(CURSOR_MOVED, BOUNDS, Point(20.0, 20.0), [])
    assert dot.hash_layout() != before


def test_hash_changes_with_radius_and_color():
    base = make_dot(radius=20.0, color=RED).hash_layout()
    assert make_dot(radius=21.0, color=RED).hash_layout() != base
    assert make_dot(radius=20.0, color=GREEN).hash_layout() != base
