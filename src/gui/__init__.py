"""Forma triangular y elementos gráficos Qt de Trigon."""

from gui.triangle import Triangle

__all__ = ["Triangle"]
