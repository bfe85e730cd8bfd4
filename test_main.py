import sys
import threading
from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")
pytest.importorskip("pystray")

import main


def test_install_exception_hooks(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)

    main.install_exception_hooks()

    assert sys.excepthook is main.log_unhandled_exception
    assert threading.excepthook is main.log_thread_exception


def test_thread_exception_is_logged(caplog):
    try:
        raise RuntimeError("tray backend failed")
    except RuntimeError as exc:
        args = SimpleNamespace(
            exc_type=RuntimeError, exc_value=exc,
            exc_traceback=exc.__traceback__,
            thread=SimpleNamespace(name="tray"),
        )
    with caplog.at_level("ERROR", logger="daily_tracker"):
        main.log_thread_exception(args)

    assert "Unhandled exception in thread tray" in caplog.text
    assert "tray backend failed" in caplog.text


def test_thread_exception_without_thread(caplog):
    args = SimpleNamespace(exc_type=ValueError, exc_value=ValueError("x"),
                           exc_traceback=None, thread=None)
    with caplog.at_level("ERROR", logger="daily_tracker"):
        main.log_thread_exception(args)
    assert "thread ?" in caplog.text
