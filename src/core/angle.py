"""Ángulos y especificaciones de ángulo para la forma triangular.

`Angle` es un valor inmutable guardado en radianes. Las especificaciones
(`UnsetAngle`, `FixedAngle`, `PlacementAngle`) describen cómo obtener un
ángulo a partir del rectángulo en el que se dibuja la forma; se evalúan de
forma explícita con `evaluate(rect)` en cada cálculo del trazado.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union

# Tolerancia (en grados) para aceptar que A + B + C suman 180°.
ANGLE_SUM_TOLERANCE_DEG = 1e-6


class SizedRect(Protocol):
    """Cualquier rectángulo con `width()` y `height()` (p. ej. `QRectF`)."""

    def width(self) -> float: ...

    def height(self) -> float: ...


@dataclass(frozen=True, order=True)
class Angle:
    """Medida angular inmutable."""

    radians: float

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(math.radians(value))

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls(float(value))

    @classmethod
    def zero(cls) -> "Angle":
        return cls(0.0)

    @classmethod
    def straight(cls) -> "Angle":
        """Ángulo llano (180°)."""
        return cls(math.pi)

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def __add__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def isclose(self, other: "Angle", abs_tol_deg: float = ANGLE_SUM_TOLERANCE_DEG) -> bool:
        """Compara dos ángulos con tolerancia absoluta en grados."""
        return math.isclose(self.degrees, other.degrees, rel_tol=0.0, abs_tol=abs_tol_deg)

    def is_finite(self) -> bool:
        return math.isfinite(self.radians)


class BaseCorner(str, Enum):
    """Esquina inferior del triángulo a la que pertenece un ángulo."""
    LEFT = "left"
    RIGHT = "right"


def clamp_placement(placement: float) -> float:
    """Restringe la posición relativa del vértice superior a [0, 1]."""
    return max(0.0, min(1.0, float(placement)))


@dataclass(frozen=True)
class UnsetAngle:
    """Ángulo sin definir; la forma usa la disposición por defecto."""

    def evaluate(self, rect: SizedRect) -> Optional[Angle]:
        return None


@dataclass(frozen=True)
class FixedAngle:
    """Ángulo constante, independiente del rectángulo."""

    angle: Angle

    def evaluate(self, rect: SizedRect) -> Optional[Angle]:
        return self.angle


@dataclass(frozen=True)
class PlacementAngle:
    """Ángulo de base derivado de la posición del vértice superior.

    Con `placement = p`, el vértice superior queda a la fracción `p` del
    borde superior del rectángulo y la base apoyada en el borde inferior:

        LEFT:  atan(h / (w * p))
        RIGHT: atan(h / (w * (1 - p)))

    Se usa `atan2` para que `p = 0` o `p = 1` den 90° en lugar de dividir
    por cero.
    """

    placement: float
    corner: BaseCorner

    def __post_init__(self) -> None:
        object.__setattr__(self, "placement", clamp_placement(self.placement))

    def evaluate(self, rect: SizedRect) -> Optional[Angle]:
        if self.corner is BaseCorner.LEFT:
            run = rect.width() * self.placement
        else:
            run = rect.width() * (1.0 - self.placement)
        return Angle.from_radians(math.atan2(rect.height(), run))


AngleSpec = Union[UnsetAngle, FixedAngle, PlacementAngle]

UNSET = UnsetAngle()


def third_angle(angle_a: Optional[Angle], angle_b: Optional[Angle]) -> Optional[Angle]:
    """Devuelve 180° − A − B, o `None` si falta alguno de los dos."""
    if angle_a is None or angle_b is None:
        return None
    return Angle.straight() - angle_a - angle_b


def forms_triangle(
    angle_a: Optional[Angle],
    angle_b: Optional[Angle],
    angle_c: Optional[Angle],
    *,
    tolerance_deg: float = ANGLE_SUM_TOLERANCE_DEG,
) -> bool:
    """Indica si los tres ángulos son positivos y suman 180°.

    Args:
        angle_a: Ángulo inferior izquierdo.
        angle_b: Ángulo inferior derecho.
        angle_c: Ángulo superior.
        tolerance_deg: Tolerancia de la suma, en grados.

    Returns:
        `True` si los tres están definidos, son finitos, estrictamente
        positivos y su suma es 180° dentro de la tolerancia.
    """
    angles = (angle_a, angle_b, angle_c)
    if any(angle is None for angle in angles):
        return False
    zero = Angle.zero()
    for angle in angles:
        if not angle.is_finite() or angle <= zero:
            return False
    total = angle_a + angle_b + angle_c
    return total.isclose(Angle.straight(), abs_tol_deg=tolerance_deg)
