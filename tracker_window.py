"""Daily tracker window (tkinter): twelve month columns of clickable dots."""

import logging
from typing import Callable
from tkinter import font as tkfont
import tkinter as tk

from PIL import ImageTk

from dot import (
    CURSOR_LEFT,
    CURSOR_MOVED,
    Dot,
    Event,
    EventKind,
    MouseButton,
    Point,
    Quad,
    Rectangle,
    Status,
    button_pressed,
    button_released,
)
from icon_gen import create_icon_image
from settings import load_settings, save_settings
from theme import palette_for
from tracker_logic import CalendarTracker, DayPressed, build_columns

LOGGER = logging.getLogger("daily_tracker.window")

TITLE = "Daily tracker"

# Layout (pixels)
HEADER_SIZE = 30
DAY_SPACING = 10
MONTH_SPACING = 20
SCROLLBAR_WIDTH = 10

_PRESS_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}
_WHEEL_SEQUENCES = ("<MouseWheel>", "<Button-4>", "<Button-5>")
# Pointer position reported to a dot once the cursor has left its canvas
_OUTSIDE = Point(-1.0, -1.0)


class DotCanvas:
    """A tk.Canvas hosting one Dot: forwards pointer events, paints its quad.

    The Dot itself is replaced on every render (``mount``); the canvas is
    pooled and only repainted when the new dot draws a different quad.
    """

    __slots__ = ("canvas", "_dot", "_painted", "_on_message")

    def __init__(self, parent: tk.Misc, dot: Dot, on_message) -> None:
        size = dot.layout()
        self.canvas = tk.Canvas(
            parent, width=round(size.width), height=round(size.height),
            highlightthickness=0, borderwidth=0, cursor="hand2",
        )
        self._dot = dot
        self._painted: Quad | None = None
        self._on_message = on_message

        self.canvas.bind("<Motion>", lambda e: self._deliver(CURSOR_MOVED, e))
        self.canvas.bind("<Leave>", lambda _e: self._deliver(CURSOR_LEFT, None))
        for num, button in _PRESS_BUTTONS.items():
            self.canvas.bind(
                f"<ButtonPress-{num}>",
                lambda e, b=button: self._deliver(button_pressed(b), e),
            )
        self.canvas.bind("<ButtonRelease-1>",
                         lambda e: self._deliver(button_released(), e))
        for seq in _WHEEL_SEQUENCES:
            self.canvas.bind(
                seq, lambda e: self._deliver(Event(EventKind.WHEEL_SCROLLED), e))
        self._repaint()

    @property
    def bounds(self) -> Rectangle:
        size = self._dot.layout()
        return Rectangle(0.0, 0.0, size.width, size.height)

    def mount(self, dot: Dot) -> None:
        """Swap in a freshly built dot for this slot."""
        if dot.layout() != self._dot.layout():
            size = dot.layout()
            self.canvas.configure(width=round(size.width), height=round(size.height))
        self._dot = dot
        self._repaint()

    def _deliver(self, event: Event, tk_event: tk.Event | None) -> str | None:
        cursor = _OUTSIDE if tk_event is None else Point(tk_event.x, tk_event.y)
        messages: list = []
        status = self._dot.on_event(event, self.bounds, cursor, messages)
        self._repaint()
        for message in messages:
            self._on_message(message)
        # "break" stops tkinter from passing the event on to outer bindings
        return "break" if status is Status.CAPTURED else None

    def _repaint(self) -> None:
        quad = self._dot.draw(self.bounds)
        if quad == self._painted:
            return
        self._painted = quad

        b = quad.bounds
        # tk strokes centred on the outline; keep the border inside bounds
        inset = quad.border_width / 2
        self.canvas.delete("all")
        self.canvas.create_oval(
            b.x + inset, b.y + inset,
            b.x + b.width - inset, b.y + b.height - inset,
            fill=quad.background.to_hex(),
            outline=quad.border_color.to_hex() if quad.border_width > 0 else "",
            width=quad.border_width,
        )


class TrackerWindow:
    """Scrollable year view; every day is a Dot cycling none/positive/negative."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title(TITLE)
        self.root.resizable(True, True)

        settings = load_settings()
        self.dark_mode: bool = settings["dark_mode"]
        self.radius: float = settings["dot_radius"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]
        self.palette = palette_for(self.dark_mode)

        # Tracked days live for the process only
        self.tracker = CalendarTracker()

        self._setup_fonts()
        self._icon = ImageTk.PhotoImage(create_icon_image(), master=self.root)
        self.root.iconphoto(True, self._icon)

        self._frames: list[tk.Misc] = []
        self._labels: list[tk.Label] = []
        self._cells: list[list[DotCanvas]] = []
        self._scrollbar_state = "active"
        # Called after every palette switch, e.g. to refresh the tray menu
        self.palette_listeners: list[Callable[[], None]] = []
        self._build_shell()
        self._apply_palette()
        self.render()

        self.root.report_callback_exception = self._report_callback_exception
        self.root.bind("<Configure>", self._on_configure)
        self.root.bind_all("<MouseWheel>", self._on_wheel)
        self.root.bind_all("<Button-4>", self._on_wheel)
        self.root.bind_all("<Button-5>", self._on_wheel)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_header = tkfont.Font(family=base, size=HEADER_SIZE)
        self.font_footer = tkfont.Font(family=base, size=9)

    # ------------------------------------------------------------------
    # Build shell (once): scrollable month row + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._footer_label = tk.Label(self.root, font=self.font_footer)
        self._footer_label.pack(side="bottom", fill="x", pady=(2, 4))
        self._labels.append(self._footer_label)

        self._outer = tk.Frame(self.root)
        self._outer.pack(side="top", fill="both", expand=True)

        self._scrollbar = tk.Scrollbar(
            self._outer, orient="vertical", width=SCROLLBAR_WIDTH,
            borderwidth=0, highlightthickness=0, elementborderwidth=0,
            relief="flat",
        )
        self._scrollbar.pack(side="right", fill="y")
        self._scrollbar.bind("<Enter>", lambda _e: self._set_scrollbar_state("hovered"))
        self._scrollbar.bind("<Leave>", self._on_scrollbar_leave)
        self._scrollbar.bind("<ButtonPress-1>",
                             lambda _e: self._set_scrollbar_state("dragging"))
        self._scrollbar.bind("<ButtonRelease-1>",
                             lambda _e: self._set_scrollbar_state("hovered"))

        self._viewport = tk.Canvas(
            self._outer, highlightthickness=0, borderwidth=0,
            yscrollcommand=self._scrollbar.set,
        )
        self._viewport.pack(side="left", fill="both", expand=True)
        self._scrollbar.configure(command=self._viewport.yview)

        self._row = tk.Frame(self._viewport)
        self._row_id = self._viewport.create_window(0, 0, window=self._row, anchor="n")
        self._row.bind("<Configure>", self._on_row_configure)
        self._viewport.bind("<Configure>", self._on_viewport_configure)
        self._frames.extend((self.root, self._outer, self._viewport, self._row))

        # One column per month: header, then one pooled canvas per day
        for col, (month_name, dots) in enumerate(build_columns(self.tracker, self.radius)):
            column = tk.Frame(self._row)
            column.grid(row=0, column=col, padx=(0, MONTH_SPACING), sticky="n")
            self._frames.append(column)

            header = tk.Label(column, text=month_name, font=self.font_header)
            header.pack()
            self._labels.append(header)

            cells: list[DotCanvas] = []
            for dot in dots:
                cell = DotCanvas(column, dot, self.update)
                cell.canvas.pack(pady=(0, DAY_SPACING))
                cells.append(cell)
            self._cells.append(cells)

    # ------------------------------------------------------------------
    # Update / render
    # ------------------------------------------------------------------
    def update(self, message: DayPressed) -> None:
        if isinstance(message, DayPressed):
            self.tracker.on_day_clicked(message.month, message.day)
        self.render()

    def render(self) -> None:
        """Rebuild every dot from tracker state and mount it in its slot."""
        columns = build_columns(self.tracker, self.radius)
        for (_name, dots), cells in zip(columns, self._cells):
            for dot, cell in zip(dots, cells):
                cell.mount(dot)
        self._footer_label.configure(text=self._footer_text())

    def _footer_text(self) -> str:
        positive, negative = self.tracker.counts()
        return f"Positive: {positive}     Negative: {negative}"

    # ------------------------------------------------------------------
    # Palette
    # ------------------------------------------------------------------
    def _apply_palette(self) -> None:
        bg = self.palette.background.to_hex()
        fg = self.palette.text.to_hex()
        for frame in self._frames:
            frame.configure(bg=bg)
        for label in self._labels:
            label.configure(bg=bg, fg=fg)
        for cells in self._cells:
            for cell in cells:
                cell.canvas.configure(bg=bg)
        self._set_scrollbar_state(self._scrollbar_state)

    def _set_scrollbar_state(self, state: str) -> None:
        self._scrollbar_state = state
        bar = self.palette.scrollbar(state)
        scroller = bar.scroller.to_hex()
        self._scrollbar.configure(
            troughcolor=bar.background.to_hex(),
            background=scroller,
            activebackground=scroller,
        )

    def _on_scrollbar_leave(self, _event: tk.Event) -> None:
        # Keep the dragging look while the button is still held
        if self._scrollbar_state != "dragging":
            self._set_scrollbar_state("active")

    def set_dark_mode(self, enabled: bool) -> None:
        self.dark_mode = enabled
        self.palette = palette_for(enabled)
        LOGGER.debug("palette -> %s", self.palette.name)
        self._apply_palette()
        settings = load_settings()
        settings["dark_mode"] = enabled
        self._save(settings)
        self.render()
        for listener in self.palette_listeners:
            listener()

    def toggle_dark_mode(self) -> None:
        self.set_dark_mode(not self.dark_mode)

    # ------------------------------------------------------------------
    # Scrolling
    # ------------------------------------------------------------------
    def _on_row_configure(self, _event: tk.Event) -> None:
        self._viewport.configure(scrollregion=self._viewport.bbox("all"))

    def _on_viewport_configure(self, event: tk.Event) -> None:
        # Keep the month row horizontally centred
        self._viewport.coords(self._row_id, event.width / 2, 0)
        self._viewport.configure(scrollregion=self._viewport.bbox("all"))

    def _on_wheel(self, event: tk.Event) -> None:
        if event.num == 4:
            step = -1
        elif event.num == 5:
            step = 1
        elif event.delta:
            step = -1 if event.delta > 0 else 1
        else:
            return
        self._viewport.yview_scroll(step * 3, "units")

    # ------------------------------------------------------------------
    # Persist window size
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        self._save(settings)

    @staticmethod
    def _save(settings: dict) -> None:
        try:
            save_settings(settings)
        except OSError:
            LOGGER.exception("could not save settings")

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.update_idletasks()
        if self._saved_width is not None and self._saved_height is not None:
            self._position_window(override_size=(self._saved_width, self._saved_height))
        else:
            self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Centre on screen
    # ------------------------------------------------------------------
    def _position_window(self, override_size: tuple[int, int] | None = None) -> None:
        self.root.update_idletasks()
        screen_w = self.root.winfo_screenwidth()
        screen_h = self.root.winfo_screenheight()

        if override_size:
            win_w, win_h = override_size
        else:
            win_w = self._row.winfo_reqwidth() + SCROLLBAR_WIDTH + MONTH_SPACING
            content_h = (self._row.winfo_reqheight()
                         + self._footer_label.winfo_reqheight())
            win_h = min(content_h, int(screen_h * 0.8))

        x = max(0, (screen_w - win_w) // 2)
        y = max(0, (screen_h - win_h) // 2)
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")

    # ------------------------------------------------------------------
    # Error reporting
    # ------------------------------------------------------------------
    def _report_callback_exception(self, exc_type, exc, tb) -> None:
        LOGGER.error("exception in tkinter callback", exc_info=(exc_type, exc, tb))
