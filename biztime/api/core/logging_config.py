import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers we own carry this name so repeated setup does not stack them
HANDLER_NAME = "biztime"

# SQL statement echo and per-request access lines follow their own level
LIBRARY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def _level(name: str) -> int:
    value = getattr(logging, name.upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _owned_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_NAME)]


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    library_level: str = "WARNING",
) -> None:
    """
    Send service logs to the console (and ``logfile`` when set).

    ``library_level`` applies to SQLAlchemy's engine logger and uvicorn's
    access log; set it to ``INFO`` to see every SQL statement.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))

    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(_level(library_level))

    if _owned_handlers(root):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_NAME)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(f"{HANDLER_NAME}.file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
