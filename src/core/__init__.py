"""API pública del núcleo geométrico de Trigon.

Reexpone el tipo de ángulo y sus especificaciones para facilitar importaciones.
"""

from core.angle import (
    ANGLE_SUM_TOLERANCE_DEG,
    Angle,
    AngleSpec,
    BaseCorner,
    FixedAngle,
    PlacementAngle,
    UnsetAngle,
)

__all__ = [
    "ANGLE_SUM_TOLERANCE_DEG",
    "Angle",
    "AngleSpec",
    "BaseCorner",
    "FixedAngle",
    "PlacementAngle",
    "UnsetAngle",
]
