import pytest

from theme import BLACK, DARK, LIGHT, WHITE, Color, palette_for


def test_from_rgb8():
    assert Color.from_rgb8(255, 0, 51) == Color(1.0, 0.0, 0.2, 1.0)


def test_to_hex():
    assert Color.from_rgb8(0x36, 0x39, 0x3F).to_hex() == "#36393f"
    assert WHITE.to_hex() == "#ffffff"
    assert BLACK.to_hex() == "#000000"


def test_into_linear():
    r, g, b, a = Color(1.0, 0.0, 0.5, 0.25).into_linear()
    assert r == pytest.approx(1.0)
    assert g == 0.0
    assert b == pytest.approx(0.21404, abs=1e-4)
    assert a == 0.25
    # low values use the linear segment
    assert Color(0.04, 0.04, 0.04).into_linear()[0] == pytest.approx(0.04 / 12.92)


def test_over_blends_onto_background():
    half_white = WHITE.with_alpha(0.5)
    assert half_white.over(BLACK) == Color(0.5, 0.5, 0.5, 1.0)
    assert WHITE.over(BLACK) == WHITE


def test_palette_for():
    assert palette_for(True) is DARK
    assert palette_for(False) is LIGHT


def test_dark_palette_colors():
    assert DARK.background.to_hex() == "#36393f"
    assert DARK.text == WHITE
    assert DARK.scrollbar("active").background.to_hex() == "#40444b"
    assert DARK.scrollbar("active").scroller.to_hex() == "#7289da"


@pytest.mark.parametrize("palette", [DARK, LIGHT])
def test_scrollbar_variants_derive_from_each_other(palette):
    active = palette.scrollbar("active")
    hovered = palette.scrollbar("hovered")
    dragging = palette.scrollbar("dragging")
    assert hovered.scroller == palette.scroller_hovered
    assert hovered.background == palette.surface.with_alpha(0.5).over(palette.background)
    assert dragging.background == hovered.background
    assert dragging.scroller == palette.scroller_dragging
    assert active.scroller == palette.scroller


def test_unknown_scrollbar_state():
    with pytest.raises(ValueError):
        DARK.scrollbar("pressed")
