"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

TRAY_TITLE = "Daily tracker"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_toggle_dark: Callable[[], None] | None = None,
    is_dark: Callable[[], bool] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Tracker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_toggle_dark is not None:
        items.append(MenuItem(
            "Dark Mode",
            lambda _icon, _item: on_toggle_dark(),
            checked=(lambda _item: is_dark()) if is_dark is not None else None,
        ))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    return pystray.Icon("daily-tracker", icon_image, TRAY_TITLE, menu)
