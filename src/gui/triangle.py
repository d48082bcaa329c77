"""Forma triangular con ángulos configurables.

`Triangle` es un valor inmutable que describe los ángulos de la base y el
margen interior acumulado. Con un rectángulo concreto produce un
`QPainterPath` cerrado de tres vértices que llena ese rectángulo.

Política de errores: una configuración de ángulos que no forma un triángulo
no lanza excepción. Se registra un aviso y la forma vuelve a la disposición
por defecto (vértice centrado arriba, base abajo), de modo que siempre se
dibuja algo.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QPainterPath

from core.angle import (
    UNSET,
    Angle,
    AngleSpec,
    BaseCorner,
    FixedAngle,
    PlacementAngle,
    clamp_placement,
    forms_triangle,
    third_angle,
)
from gui.triangle_geometry import TrianglePoints, compute_triangle_points, inset_rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Triangle:
    """Triángulo que se adapta al rectángulo en el que se dibuja.

    Attributes:
        angle_a: Especificación del ángulo inferior izquierdo.
        angle_b: Especificación del ángulo inferior derecho.
        inset_amount: Margen interior acumulado (nunca negativo).
    """

    angle_a: AngleSpec = UNSET
    angle_b: AngleSpec = UNSET
    inset_amount: float = 0.0

    def __post_init__(self) -> None:
        if self.inset_amount < 0:
            logger.warning("Margen interior negativo (%.4f) ignorado.", self.inset_amount)
            object.__setattr__(self, "inset_amount", 0.0)

    @classmethod
    def from_angles(cls, angle_a: Angle, angle_b: Angle) -> "Triangle":
        """Crea un triángulo con los ángulos inferiores dados.

        El ángulo superior se deduce (180° − A − B). Si A o B no son
        positivos, o si su suma alcanza 180°, se registra un aviso y se
        devuelve el triángulo por defecto.

        Args:
            angle_a: Ángulo inferior izquierdo.
            angle_b: Ángulo inferior derecho.

        Returns:
            Nuevo `Triangle`.
        """
        angle_c = third_angle(angle_a, angle_b)
        if not forms_triangle(angle_a, angle_b, angle_c):
            logger.warning(
                "Ángulos inválidos (A=%.4f°, B=%.4f°): no forman un triángulo; "
                "se usa la disposición por defecto.",
                angle_a.degrees,
                angle_b.degrees,
            )
            return cls()
        return cls(FixedAngle(angle_a), FixedAngle(angle_b))

    @classmethod
    def from_top_vertex_placement(cls, placement: float) -> "Triangle":
        """Crea un triángulo con el vértice superior en `placement` (0.0-1.0).

        Los ángulos de la base se calculan en cada rectángulo para que el
        vértice quede a esa fracción del borde superior.

        Args:
            placement: Posición horizontal relativa del vértice superior;
                fuera de [0, 1] se recorta y se registra un aviso.

        Returns:
            Nuevo `Triangle`.
        """
        clamped = clamp_placement(placement)
        if clamped != placement:
            logger.warning(
                "Posición del vértice %.4f fuera de [0, 1]; se usa %.4f.",
                placement,
                clamped,
            )
        return cls(
            PlacementAngle(clamped, BaseCorner.LEFT),
            PlacementAngle(clamped, BaseCorner.RIGHT),
        )

    def angles(self, rect: QRectF) -> Tuple[Optional[Angle], Optional[Angle], Optional[Angle]]:
        """Evalúa A, B y C sobre el rectángulo original (sin margen)."""
        angle_a = self.angle_a.evaluate(rect)
        angle_b = self.angle_b.evaluate(rect)
        return angle_a, angle_b, third_angle(angle_a, angle_b)

    def uses_angles(self, rect: QRectF) -> bool:
        """Indica si en `rect` se aplica la construcción dirigida por ángulos."""
        return forms_triangle(*self.angles(rect))

    def inset_rect(self, rect: QRectF) -> QRectF:
        """Rectángulo interior en el que se construye el trazado.

        Args:
            rect: Rectángulo original de la forma.

        Returns:
            `rect` reducido `inset_amount` por cada lado.
        """
        return inset_rect(rect, self.inset_amount)

    def vertices(self, rect: QRectF) -> Optional[TrianglePoints]:
        """Vértices `(base_izq, vértice, base_der)` o `None` si no hay área."""
        return compute_triangle_points(rect, *self.angles(rect), inset_amount=self.inset_amount)

    def path(self, rect: QRectF) -> QPainterPath:
        """Trazado cerrado del triángulo dentro de `rect`.

        Args:
            rect: Rectángulo donde se dibuja la forma.

        Returns:
            `QPainterPath` con tres vértices y cierre; vacío si el margen
            interior consume todo el rectángulo.
        """
        path = QPainterPath()
        points = self.vertices(rect)
        if points is None:
            return path
        first, *rest = points
        path.moveTo(QPointF(*first))
        for point in rest:
            path.lineTo(QPointF(*point))
        path.closeSubpath()
        return path

    def inset(self, amount: float) -> "Triangle":
        """Devuelve una copia con `amount` añadido al margen interior.

        Args:
            amount: Margen adicional; los valores negativos se ignoran con
                un aviso.

        Returns:
            Nuevo `Triangle` (o el mismo si `amount` es negativo).
        """
        if amount < 0:
            logger.warning("Margen interior negativo (%.4f) ignorado.", amount)
            return self
        return replace(self, inset_amount=self.inset_amount + amount)
