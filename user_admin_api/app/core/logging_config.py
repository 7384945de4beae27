"""
Root logger setup.

``create_app`` calls ``setup_logging`` with the configured level and
optional log file.  Modules only ever call ``logging.getLogger(__name__)``
and leave handler wiring to this module.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optionally file) output to the root logger.

    Does nothing when the root logger already has handlers, so building
    several apps in one process, as the test suite does, never
    duplicates output.

    Parameters
    ----------
    level : str
        Name of the level, in any case.  Names ``logging`` does not know
        are treated as ``INFO``.
    logfile : Optional[str]
        Also write records to this file, opened as UTF-8.  Relative
        paths resolve against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    resolved = getattr(logging, level.upper(), None)
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
