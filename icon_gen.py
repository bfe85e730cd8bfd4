"""Generate the tray / window icon (PIL Image, in-memory)."""

from PIL import Image, ImageDraw

from dot import HOVER_BORDER_RATIO
from theme import BLACK, Color
from tracker_logic import DayState, day_color


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return tuple(max(0, min(255, round(c * 255))) for c in color)


def create_icon_image(size: int = 64) -> Image.Image:
    """Return a size×size RGBA image: one hovered "positive" dot on transparent."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    radius = size / 2
    border = max(1, round(radius * HOVER_BORDER_RATIO))
    draw.ellipse(
        (0, 0, size - 1, size - 1),
        fill=_rgba(day_color(DayState.POSITIVE)),
        outline=_rgba(BLACK),
        width=border,
    )
    return img
