"""Descarga asíncrona de avatares remotos."""

from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List

from PyQt6 import sip
from PyQt6.QtCore import QObject, Qt, QUrl
from PyQt6.QtGui import QPixmap
from PyQt6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest
from PyQt6.QtWidgets import QLabel

from usuarios_app.utils.logger import get_logger

logger = get_logger(__name__)


class QtCargadorImagenes(QObject):
    """Descarga cada URL una vez y la reparte entre las etiquetas que la piden.

    Conserva como máximo ``MAX_CACHE`` imágenes, descartando la usada hace más tiempo.
    """

    MAX_CACHE = 200

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)
        self._cache: OrderedDict[str, QPixmap] = OrderedDict()
        self._esperando: Dict[str, List[QLabel]] = {}

    def solicitar(self, url: str, destino: QLabel) -> None:
        pixmap = self._cache.get(url)
        if pixmap is not None:
            self._cache.move_to_end(url)
            self._aplicar(pixmap, destino)
            return

        if url in self._esperando:
            self._esperando[url].append(destino)
            return

        self._esperando[url] = [destino]
        reply = self._manager.get(QNetworkRequest(QUrl(url)))
        reply.finished.connect(lambda reply=reply, url=url: self._on_reply(url, reply))

    def _on_reply(self, url: str, reply: QNetworkReply) -> None:
        destinos = self._esperando.pop(url, [])
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.warning("No se pudo descargar el avatar %s: %s", url, reply.errorString())
                return
            pixmap = QPixmap()
            if not pixmap.loadFromData(bytes(reply.readAll())):
                logger.warning("Avatar con formato no reconocido: %s", url)
                return
            self._guardar(url, pixmap)
            for destino in destinos:
                self._aplicar(pixmap, destino)
        finally:
            reply.deleteLater()

    def _guardar(self, url: str, pixmap: QPixmap) -> None:
        self._cache[url] = pixmap
        self._cache.move_to_end(url)
        while len(self._cache) > self.MAX_CACHE:
            self._cache.popitem(last=False)

    @staticmethod
    def _aplicar(pixmap: QPixmap, destino: QLabel) -> None:
        # la fila pudo eliminarse mientras llegaba la imagen
        if sip.isdeleted(destino):
            return
        destino.setPixmap(
            pixmap.scaled(
                destino.size(),
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )


__all__ = ["QtCargadorImagenes"]
