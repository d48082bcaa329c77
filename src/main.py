"""Punto de entrada de la vista previa de Trigon.

Este módulo inicializa PyQt6, configura el logging y muestra la ventana
con el triángulo de ejemplo.
"""

import sys
import os

# Aseguramos que Python encuentre los módulos dentro de `src` al ejecutar
# el archivo directamente.
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from PyQt6.QtWidgets import QApplication
from gui.preview import TrianglePreviewWindow
from utils.log import setup_logging

def main():
    """
    Arranca la aplicación Qt y muestra la vista previa.

    Side Effects:
        Crea la instancia de `QApplication`, muestra la ventana y entra en el
        bucle de eventos de Qt.
    """
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Trigon")

    window = TrianglePreviewWindow()
    window.show()

    sys.exit(app.exec())

if __name__ == "__main__":
    main()
