"""
Trigon Preview
Ventana de vista previa que dibuja un triángulo en una escena Qt.
"""
from __future__ import annotations

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QGraphicsScene, QGraphicsView, QMainWindow

from gui.items import TriangleItem
from gui.style import PREVIEW_STYLE, TriangleStyle
from gui.triangle import Triangle
from utils.log import get_logger

logger = get_logger(__name__)

PREVIEW_WIDTH = 400
PREVIEW_HEIGHT = 300


class TrianglePreviewWindow(QMainWindow):
    """
    Muestra un único `TriangleItem` que ocupa toda la escena.
    """
    def __init__(
        self,
        triangle: Triangle | None = None,
        style: TriangleStyle = PREVIEW_STYLE,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Trigon - Vista previa")
        self.resize(PREVIEW_WIDTH + 40, PREVIEW_HEIGHT + 40)

        if triangle is None:
            triangle = Triangle.from_top_vertex_placement(1.0)

        rect = QRectF(0.0, 0.0, PREVIEW_WIDTH, PREVIEW_HEIGHT)
        self.scene = QGraphicsScene(rect, self)
        self.item = TriangleItem(rect, triangle, style)
        self.scene.addItem(self.item)

        self.view = QGraphicsView(self.scene, self)
        self.view.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setCentralWidget(self.view)
        logger.info("Vista previa: %s en %sx%s", triangle, PREVIEW_WIDTH, PREVIEW_HEIGHT)
