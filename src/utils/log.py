"""Configuración centralizada de logging para Trigon."""
from __future__ import annotations

import logging

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """Configura logging en consola una sola vez.

    Nota:
        - Llamadas posteriores no añaden handlers duplicados.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
