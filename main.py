"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import os
import sys
import threading

from icon_gen import create_icon_image
from tracker_window import TrackerWindow
from tray_icon import create_tray

LOGGER = logging.getLogger("daily_tracker")

_LOG_PATH = os.path.join(os.path.expanduser("~"), ".daily-tracker.log")


def setup_logging(log_path: str) -> None:
    LOGGER.setLevel(logging.DEBUG)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    LOGGER.addHandler(handler)


def log_unhandled_exception(exc_type, exc, tb) -> None:
    LOGGER.error("Unhandled exception", exc_info=(exc_type, exc, tb))


def log_thread_exception(args) -> None:
    """threading.excepthook target: the tray runs on its own thread."""
    name = args.thread.name if args.thread is not None else "?"
    LOGGER.error("Unhandled exception in thread %s", name,
                 exc_info=(args.exc_type, args.exc_value, args.exc_traceback))


def install_exception_hooks() -> None:
    sys.excepthook = log_unhandled_exception
    threading.excepthook = log_thread_exception


def main() -> None:
    setup_logging(_LOG_PATH)
    install_exception_hooks()

    # DPI awareness so fonts / dots are crisp on Hi-DPI monitors
    if sys.platform == "win32":
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError):
            LOGGER.debug("DPI awareness not available")

    LOGGER.info("starting")
    tracker_win = TrackerWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        tracker_win.root.after(0, tracker_win.toggle)

    def on_toggle_dark() -> None:
        tracker_win.root.after(0, tracker_win.toggle_dark_mode)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            tracker_win.hide()
            tracker_win.root.destroy()
            LOGGER.info("exiting")
        tracker_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit,
                       on_toggle_dark=on_toggle_dark,
                       is_dark=lambda: tracker_win.dark_mode)
    # pystray backends that build the menu once need a nudge for the check mark
    tracker_win.palette_listeners.append(tray.update_menu)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    tracker_win.show()
    # tkinter main loop on the main thread
    tracker_win.root.mainloop()


if __name__ == "__main__":
    main()
