"""Avisos modales con ``QMessageBox``."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import QMessageBox, QWidget


class QtNotificador:
    """Muestra los avisos del servicio y del controlador como alertas."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        self.parent = parent

    def notificar(self, titulo: str, mensaje: str) -> None:
        QMessageBox.warning(self.parent, titulo, mensaje)


__all__ = ["QtNotificador"]
