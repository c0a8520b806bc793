"""Logging de la aplicación.

``main`` llama a ``setup_logging`` con el nivel de ``AppConfig``; los módulos
solo piden su logger con ``get_logger(__name__)``.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    nivel = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=nivel if isinstance(nivel, int) else logging.INFO,
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "get_logger", "setup_logging"]
