"""Elementos gráficos de Trigon para `QGraphicsScene`."""
from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsPathItem

from gui.style import DEFAULT_STYLE, TriangleStyle
from gui.triangle import Triangle


class TriangleItem(QGraphicsPathItem):
    """Elemento gráfico que dibuja un `Triangle` dentro de un rectángulo."""

    def __init__(
        self,
        rect: QRectF,
        triangle: Triangle | None = None,
        style: TriangleStyle = DEFAULT_STYLE,
    ) -> None:
        """Inicializa la instancia y configura el elemento gráfico.

        Args:
            rect: Rectángulo que ocupa la forma.
            triangle: Forma a dibujar; por defecto `Triangle()`.
            style: Estilo de dibujo aplicado.

        Returns:
            None.

        Side Effects:
            Modifica el estado del item o la escena.
        """
        super().__init__()
        self._base_rect = QRectF(rect)
        self._triangle = triangle if triangle is not None else Triangle()
        self._style = style
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable)
        self._apply_style()
        self._update_path()

    def base_rect(self) -> QRectF:
        """Devuelve el rectángulo base.

        Returns:
            Copia del rectángulo que ocupa la forma.
        """
        return QRectF(self._base_rect)

    def triangle(self) -> Triangle:
        return self._triangle

    def style(self) -> TriangleStyle:
        return self._style

    def set_rect(self, rect: QRectF) -> None:
        """Actualiza el rectángulo y recalcula el trazado."""
        self._base_rect = QRectF(rect)
        self._update_path()

    def set_triangle(self, triangle: Triangle) -> None:
        """Sustituye la forma dibujada."""
        self._triangle = triangle
        self._update_path()

    def set_style(self, style: TriangleStyle) -> None:
        """Aplica un nuevo estilo; el margen del trazo puede cambiar el trazado."""
        self._style = style
        self._apply_style()
        self._update_path()

    def drawn_triangle(self) -> Triangle:
        """Forma efectiva, con el margen de medio trazo si `stroke_inside`."""
        border = self._style.border_inset
        if border > 0.0:
            return self._triangle.inset(border)
        return self._triangle

    def _apply_style(self) -> None:
        pen = QPen(QColor(self._style.stroke_color), self._style.stroke_px)
        pen.setCapStyle(self._style.cap_style)
        pen.setJoinStyle(self._style.join_style)
        self.setPen(pen)
        if self._style.fill_color:
            self.setBrush(QBrush(QColor(self._style.fill_color)))
        else:
            self.setBrush(QBrush(Qt.BrushStyle.NoBrush))

    def _update_path(self) -> None:
        self.setPath(self.drawn_triangle().path(self._base_rect))
