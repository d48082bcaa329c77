"""
Drawing style presets for Trigon.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import Qt


@dataclass(frozen=True)
class TriangleStyle:
    stroke_px: float
    stroke_color: str
    fill_color: Optional[str]
    # Mantiene el trazo dentro del rectángulo (margen de medio trazo).
    stroke_inside: bool
    cap_style: Qt.PenCapStyle
    join_style: Qt.PenJoinStyle

    @property
    def border_inset(self) -> float:
        """Margen interior que requiere el trazo para no salir del rectángulo."""
        if not self.stroke_inside:
            return 0.0
        return self.stroke_px / 2.0


DEFAULT_STYLE = TriangleStyle(
    stroke_px=2.0,
    stroke_color="#000000",
    fill_color=None,
    stroke_inside=False,
    cap_style=Qt.PenCapStyle.SquareCap,
    join_style=Qt.PenJoinStyle.MiterJoin,
)

PREVIEW_STYLE = TriangleStyle(
    stroke_px=10.0,
    stroke_color="#00C000",
    fill_color=None,
    stroke_inside=True,
    cap_style=Qt.PenCapStyle.SquareCap,
    join_style=Qt.PenJoinStyle.MiterJoin,
)
