"""
Utilidades geométricas para la forma triangular.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

from PyQt6.QtCore import QRectF

from core.angle import Angle, forms_triangle

Point = Tuple[float, float]
TrianglePoints = Tuple[Point, Point, Point]


def inset_rect(rect: QRectF, amount: float) -> QRectF:
    """Reduce el rectángulo `amount` unidades por cada lado."""
    return QRectF(rect).adjusted(amount, amount, -amount, -amount)


def default_triangle_points(rect: QRectF) -> TrianglePoints:
    """Triángulo isósceles que llena el rectángulo.

    Returns:
        Tupla `(base_izq, vértice, base_der)`: la base apoyada en el borde
        inferior y el vértice en el centro del borde superior.
    """
    left = rect.left()
    right = rect.left() + rect.width()
    top = rect.top()
    bottom = rect.top() + rect.height()
    mid_x = left + rect.width() / 2.0
    return (left, bottom), (mid_x, top), (right, bottom)


def law_of_sines_sides(side_c: float, angle_a: Angle, angle_b: Angle, angle_c: Angle) -> tuple[float, float]:
    """Resuelve los lados `a` y `b` con c / sin(C) = a / sin(A) = b / sin(B)."""
    ratio = side_c / math.sin(angle_c.radians)
    return ratio * math.sin(angle_a.radians), ratio * math.sin(angle_b.radians)


def raw_angle_points(rect: QRectF, angle_a: Angle, angle_b: Angle, angle_c: Angle) -> TrianglePoints:
    """Construye el triángulo sin normalizar a partir de sus ángulos.

    El lado `c` es el ancho del rectángulo. Se parte de la esquina superior
    izquierda, se avanza el lado `b` con ángulo A y luego el lado `a` con
    ángulo −B; con el eje y hacia abajo el resultado queda invertido (el
    vértice C por debajo de la base).

    Returns:
        Tupla `(p_a, p_c, p_b)` en el orden en que se recorren.
    """
    side_a, side_b = law_of_sines_sides(rect.width(), angle_a, angle_b, angle_c)
    p_a = (rect.left(), rect.top())
    p_c = (
        p_a[0] + side_b * math.cos(angle_a.radians),
        p_a[1] + side_b * math.sin(angle_a.radians),
    )
    # Ángulo relativo del tramo C -> B.
    p_b = (
        p_c[0] + side_a * math.cos(-angle_b.radians),
        p_c[1] + side_a * math.sin(-angle_b.radians),
    )
    return p_a, p_c, p_b


def _bounds(points: TrianglePoints) -> tuple[float, float, float, float]:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def fit_scale(path_width: float, path_height: float, target: QRectF) -> float:
    """Escala uniforme que encaja el trazado en `target`.

    Si el trazado es proporcionalmente más alto que el destino se ajusta la
    altura; si es más ancho, el ancho.
    """
    if path_height / path_width < target.height() / target.width():
        return target.width() / path_width
    return target.height() / path_height


def normalize_points(points: TrianglePoints, target: QRectF) -> TrianglePoints:
    """Invierte, escala y centra el triángulo crudo dentro de `target`.

    Orden: volteo vertical, traslación vertical para reanclar en el origen,
    escala uniforme y traslación final que centra el resultado en `target`.
    El eje que no se llena queda centrado.
    """
    min_x, min_y, max_x, max_y = _bounds(points)
    width = max_x - min_x
    height = max_y - min_y
    scale = fit_scale(width, height, target)

    flipped = [(x, -y) for x, y in points]
    anchored = [(x - min_x, y + max_y) for x, y in flipped]
    scaled = [(x * scale, y * scale) for x, y in anchored]
    dx = target.left() + (target.width() - width * scale) / 2.0
    dy = target.top() + (target.height() - height * scale) / 2.0
    moved = [(x + dx, y + dy) for x, y in scaled]
    return moved[0], moved[1], moved[2]


def compute_triangle_points(
    rect: QRectF,
    angle_a: Optional[Angle],
    angle_b: Optional[Angle],
    angle_c: Optional[Angle],
    inset_amount: float = 0.0,
) -> Optional[TrianglePoints]:
    """Calcula los vértices del triángulo dentro de `rect`.

    Args:
        rect: Rectángulo original de la forma.
        angle_a: Ángulo inferior izquierdo (evaluado sobre `rect`).
        angle_b: Ángulo inferior derecho (evaluado sobre `rect`).
        angle_c: Ángulo superior (evaluado sobre `rect`).
        inset_amount: Margen interior aplicado antes de construir.

    Returns:
        Tupla `(base_izq, vértice, base_der)`, o `None` si el rectángulo
        interior no tiene área.
    """
    target = inset_rect(rect, inset_amount)
    if not (target.width() > 0.0 and target.height() > 0.0):
        return None
    if not forms_triangle(angle_a, angle_b, angle_c):
        return default_triangle_points(target)
    raw = raw_angle_points(target, angle_a, angle_b, angle_c)
    p_a, p_c, p_b = normalize_points(raw, target)
    return p_a, p_c, p_b
