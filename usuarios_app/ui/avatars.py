"""Representaciones del avatar de cada fila.

La estrategia se elige una sola vez al arrancar, según la plataforma o la
configuración: en macOS se muestran las iniciales dentro de una insignia de
color; en el resto se muestra la imagen remota del usuario.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Protocol

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QWidget

from usuarios_app.models.user import User

AVATAR_SIZE = 50
BADGE_COLOR = "#2196F3"


@dataclass(frozen=True, slots=True)
class AvatarVista:
    tipo: str
    texto: str = ""
    url: str = ""


class CargadorImagenes(Protocol):
    def solicitar(self, url: str, destino: QLabel) -> None: ...


class AvatarRenderer(Protocol):
    tipo: str

    def vista(self, usuario: User) -> AvatarVista: ...

    def crear_widget(self, vista: AvatarVista, imagenes: Optional[CargadorImagenes]) -> QWidget: ...


def _label_base() -> QLabel:
    label = QLabel()
    label.setFixedSize(AVATAR_SIZE, AVATAR_SIZE)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label


class AvatarIniciales:
    """Insignia circular con las iniciales del usuario."""

    tipo = "iniciales"

    def vista(self, usuario: User) -> AvatarVista:
        return AvatarVista(tipo=self.tipo, texto=usuario.iniciales)

    def crear_widget(self, vista: AvatarVista, imagenes: Optional[CargadorImagenes]) -> QWidget:
        label = _label_base()
        label.setObjectName("avatarIniciales")
        label.setText(vista.texto)
        label.setStyleSheet(
            f"background-color: {BADGE_COLOR}; color: white; font-size: 14pt;"
            f" font-weight: 700; border-radius: {AVATAR_SIZE // 2}px;"
        )
        return label


class AvatarImagen:
    """Imagen remota referenciada por el campo ``avatar``."""

    tipo = "imagen"

    def vista(self, usuario: User) -> AvatarVista:
        return AvatarVista(tipo=self.tipo, texto=usuario.iniciales, url=usuario.avatar)

    def crear_widget(self, vista: AvatarVista, imagenes: Optional[CargadorImagenes]) -> QWidget:
        label = _label_base()
        label.setObjectName("avatarImagen")
        label.setToolTip(vista.url)
        label.setStyleSheet(f"border-radius: {AVATAR_SIZE // 2}px; background: #e5e7eb;")
        if vista.url and imagenes is not None:
            imagenes.solicitar(vista.url, label)
        return label


def seleccionar_avatar(plataforma: str | None = None, estilo: str | None = None) -> AvatarRenderer:
    """Resuelve la estrategia de avatar.

    ``estilo`` (``"iniciales"`` o ``"imagen"``) tiene prioridad; si no se
    indica se decide por ``plataforma`` (por defecto ``sys.platform``).
    """

    if estilo == AvatarIniciales.tipo:
        return AvatarIniciales()
    if estilo == AvatarImagen.tipo:
        return AvatarImagen()
    if estilo is not None:
        raise ValueError(f"Estilo de avatar desconocido: {estilo!r}")

    plataforma = sys.platform if plataforma is None else plataforma
    if plataforma in ("darwin", "ios"):
        return AvatarIniciales()
    return AvatarImagen()


__all__ = [
    "AVATAR_SIZE",
    "AvatarImagen",
    "AvatarIniciales",
    "AvatarRenderer",
    "AvatarVista",
    "CargadorImagenes",
    "seleccionar_avatar",
]
