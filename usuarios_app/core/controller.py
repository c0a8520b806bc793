"""Controlador de la pantalla de usuarios.

Recibe los eventos de la interfaz (montaje, recarga, agregar), lanza las
consultas a través de un ``TaskRunner`` y aplica el resultado sobre
``AppState`` cuando la consulta termina.
"""

from __future__ import annotations

import time
from typing import Callable, List

from usuarios_app.core.errors import FetchError
from usuarios_app.core.services import Accion, Notificador, UserService
from usuarios_app.core.state import AppState, EstadoPantalla
from usuarios_app.core.tasks import TaskRunner
from usuarios_app.models.user import User
from usuarios_app.utils.logger import get_logger

logger = get_logger(__name__)

Observador = Callable[[EstadoPantalla], None]


class ScreenController:
    """Dueño del estado de la pantalla y de sus transiciones."""

    def __init__(
        self,
        service: UserService,
        runner: TaskRunner,
        notificador: Notificador,
        *,
        tamano_lote: int = 10,
        cooldown: float = 10.0,
        reloj: Callable[[], float] = time.monotonic,
        state: AppState | None = None,
    ) -> None:
        self._service = service
        self._runner = runner
        self._notificador = notificador
        self.tamano_lote = tamano_lote
        self.cooldown = cooldown
        self._reloj = reloj
        self._state = state or AppState()
        self._observadores: List[Observador] = []
        self._cerrado = False

    @property
    def estado(self) -> EstadoPantalla:
        return self._state.actual

    def suscribir(self, observador: Observador) -> None:
        self._observadores.append(observador)

    def _publicar(self, estado: EstadoPantalla) -> None:
        for observador in list(self._observadores):
            observador(estado)

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------
    def montar(self) -> None:
        """Carga inicial; la pantalla pasa a lista aunque la consulta falle."""

        logger.info("Carga inicial de %d usuarios", self.tamano_lote)
        self._runner.ejecutar(
            lambda: self._service.descargar(self.tamano_lote),
            self._completar_carga,
            self._fallo_carga,
        )

    def refrescar(self) -> bool:
        """Recarga la lista completa; devuelve ``True`` si se aceptó."""

        if self._cerrado or self.estado.cargando:
            return False

        ahora = self._reloj()
        if not self._state.puede_refrescar(ahora, self.cooldown):
            logger.info("Recarga rechazada por cooldown de %ss", self.cooldown)
            self._notificador.notificar(
                "Demasiadas recargas",
                f"Espere {self.cooldown:g} segundos antes de volver a recargar.",
            )
            return False
        # solo alcanzable con cooldown 0
        if self.estado.refrescando:
            return False

        self._publicar(self._state.iniciar_refresco(ahora))
        self._runner.ejecutar(
            lambda: self._service.descargar(self.tamano_lote),
            self._completar_refresco,
            self._fallo_refresco,
        )
        return True

    def agregar(self) -> None:
        """Pide un usuario más y lo antepone a la lista."""

        if self._cerrado:
            return
        self._runner.ejecutar(
            lambda: self._service.descargar(1),
            self._completar_agregar,
            self._fallo_agregar,
        )

    def cerrar(self) -> None:
        """Descarta las consultas pendientes al cerrar la pantalla."""

        self._cerrado = True
        self._observadores.clear()
        self._runner.detener()

    # ------------------------------------------------------------------
    # Finalización de consultas
    # ------------------------------------------------------------------
    def _completar_carga(self, usuarios: List[User]) -> None:
        if self._cerrado:
            return
        self._publicar(self._state.completar_carga(usuarios))

    def _completar_refresco(self, usuarios: List[User]) -> None:
        if self._cerrado:
            return
        logger.info("Recarga completada con %d usuarios", len(usuarios))
        self._publicar(self._state.completar_refresco(usuarios))

    def _fallo_carga(self, error: FetchError) -> None:
        if self._cerrado:
            return
        self._completar_carga(self._service.absorber_fallo(error, Accion.CARGA))

    def _fallo_refresco(self, error: FetchError) -> None:
        if self._cerrado:
            return
        self._completar_refresco(self._service.absorber_fallo(error, Accion.CARGA))

    def _completar_agregar(self, usuarios: List[User]) -> None:
        if self._cerrado:
            return
        if not usuarios:
            logger.warning("El servicio no devolvió ningún usuario para agregar")
            return
        self._publicar(self._state.anteponer(usuarios[0]))

    def _fallo_agregar(self, error: FetchError) -> None:
        if self._cerrado:
            return
        self._service.absorber_fallo(error, Accion.AGREGAR)


__all__ = ["ScreenController"]
