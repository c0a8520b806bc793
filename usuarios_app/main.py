"""Punto de entrada de la aplicación.

Crea los componentes de infraestructura, servicios y estado, y arranca la
interfaz gráfica principal.
"""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from usuarios_app.core.config import AppConfig
from usuarios_app.core.controller import ScreenController
from usuarios_app.core.services import UserService
from usuarios_app.infrastructure.api_client import APIClient
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.ui.avatars import seleccionar_avatar
from usuarios_app.ui.images import QtCargadorImagenes
from usuarios_app.ui.main_window import MainWindow
from usuarios_app.ui.notifier import QtNotificador
from usuarios_app.ui.workers import QtTaskRunner
from usuarios_app.utils.logger import get_logger, setup_logging


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    config = AppConfig()
    setup_logging(config.nivel_log)
    logger = get_logger(__name__)
    logger.info("Servicio de usuarios: %s", config.api_base)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    notificador = QtNotificador()
    api_client = APIClient(config.api_base, timeout=config.timeout)
    repository = UserRepository(api_client)
    user_service = UserService(repository, notificador)
    runner = QtTaskRunner(app)
    controller = ScreenController(
        user_service,
        runner,
        notificador,
        tamano_lote=config.tamano_lote,
        cooldown=config.cooldown_refresco,
    )

    window = MainWindow(
        controller=controller,
        avatar_renderer=seleccionar_avatar(estilo=config.estilo_avatar),
        imagenes=QtCargadorImagenes(app),
    )
    notificador.parent = window
    window.show()

    codigo = app.exec()
    runner.finalizar()
    sys.exit(codigo)


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
