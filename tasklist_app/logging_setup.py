import logging
import sys

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - every tasklist_app record passes
    - third-party libraries (streamlit, PIL, ...) only from WARNING up
    """

    def filter(self, record):
        if record.name == "tasklist_app" or record.name.startswith("tasklist_app."):
            return True
        return record.levelno >= logging.WARNING


def _is_console_handler(handler):
    return any(isinstance(f, _ConsoleNoiseFilter) for f in handler.filters)


def setup_logging(level=logging.INFO):
    """Attach one filtered stderr handler to the root logger.

    Streamlit executes the app script on every rerun, so this must be safe
    to call repeatedly: later calls only adjust the level.
    """
    root = logging.getLogger()
    logging.getLogger("tasklist_app").setLevel(level)

    handler = next((h for h in root.handlers if _is_console_handler(h)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler.addFilter(_ConsoleNoiseFilter())
        root.addHandler(handler)
    handler.setLevel(level)
    return handler
