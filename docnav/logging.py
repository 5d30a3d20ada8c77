"""Logging setup for docnav.

Each pipeline logs under its own area of the ``docnav`` hierarchy
(``docnav.metadata``, ``docnav.samples`` and so on), so a single noisy
area can be turned up to DEBUG without flooding the rest of the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

_LOGGER_NAME = "docnav"

AREAS: tuple[str, ...] = ("lists", "manifest", "metadata", "orchestrator", "samples", "writer")

_CONSOLE_FORMAT = "[docnav] %(levelname)s %(message)s"
_AREA_CONSOLE_FORMAT = "[docnav:%(area)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for ``name`` under the docnav hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


class _AreaFilter(logging.Filter):
    """Stamp each record with the docnav area it was logged from."""

    def filter(self, record: logging.LogRecord) -> bool:
        _, _, rest = record.name.partition(".")
        record.area = rest.split(".", 1)[0] if rest else "main"
        return True


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    debug_areas: Iterable[str] = (),
) -> logging.Logger:
    """Configure console output and an optional file sink for docnav.

    ``debug_areas`` lowers only the named areas to DEBUG; unknown names
    raise ``ValueError``. Verbose mode prefixes console lines with the area.
    """
    areas = list(debug_areas)
    unknown = [area for area in areas if area not in AREAS]
    if unknown:
        raise ValueError(
            f"Unknown logging area(s): {', '.join(unknown)}; choose from {', '.join(AREAS)}"
        )

    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for area in AREAS:
        logging.getLogger(f"{_LOGGER_NAME}.{area}").setLevel(
            logging.DEBUG if area in areas else logging.NOTSET
        )

    stream_handler = logging.StreamHandler()
    stream_handler.addFilter(_AreaFilter())
    stream_handler.setFormatter(
        logging.Formatter(_AREA_CONSOLE_FORMAT if verbose or areas else _CONSOLE_FORMAT)
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["AREAS", "configure_logging", "get_logger"]
