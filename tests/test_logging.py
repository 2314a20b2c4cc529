# tests/test_logging.py

from __future__ import annotations

import logging

import pytest

from tasklist_app.logging_setup import _ConsoleNoiseFilter, _is_console_handler, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("tasklist_app")
    handlers, level = list(root.handlers), package.level
    handler_levels = [h.level for h in handlers]
    yield
    for h, handler_level in zip(handlers, handler_levels):
        h.setLevel(handler_level)
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    package.setLevel(level)


def console_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if _is_console_handler(h)]


def test_setup_is_idempotent_across_reruns() -> None:
    first = setup_logging(logging.INFO)
    second = setup_logging(logging.DEBUG)

    assert first is second
    assert len(console_handlers()) == 1
    assert second.level == logging.DEBUG
    assert logging.getLogger("tasklist_app").level == logging.DEBUG


def make_record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "kept"),
    [
        ("tasklist_app.store", logging.DEBUG, True),
        ("tasklist_app", logging.INFO, True),
        ("tasklist_apps", logging.INFO, False),
        ("streamlit.runtime", logging.INFO, False),
        ("PIL.PngImagePlugin", logging.DEBUG, False),
        ("streamlit.runtime", logging.WARNING, True),
    ],
)
def test_noise_filter(name: str, level: int, kept: bool) -> None:
    assert _ConsoleNoiseFilter().filter(make_record(name, level)) is kept
