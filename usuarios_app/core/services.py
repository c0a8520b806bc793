"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from usuarios_app.core.errors import FetchError, RateLimitedError
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.models.user import User
from usuarios_app.utils.logger import get_logger

logger = get_logger(__name__)


class Notificador(Protocol):
    """Muestra un aviso modal al usuario."""

    def notificar(self, titulo: str, mensaje: str) -> None: ...


class Accion(Enum):
    """Operación de la pantalla que originó la consulta."""

    CARGA = "carga"
    AGREGAR = "agregar"


# (titulo, mensaje) por acción para el límite de solicitudes y el resto de fallos
MENSAJES_LIMITE = {
    Accion.CARGA: ("Demasiadas solicitudes", "Espere un momento antes de volver a recargar."),
    Accion.AGREGAR: ("Demasiadas solicitudes", "Espere un momento antes de agregar más usuarios."),
}
MENSAJES_ERROR = {
    Accion.CARGA: ("Error", "No se pudieron cargar los usuarios. Intente nuevamente más tarde."),
    Accion.AGREGAR: ("Error", "No se pudo agregar un nuevo usuario. Intente nuevamente."),
}


class UserService:
    """Orquesta la obtención de lotes de usuarios y el aviso de fallos."""

    def __init__(self, repository: UserRepository, notificador: Notificador) -> None:
        self._repository = repository
        self._notificador = notificador

    def descargar(self, cantidad: int) -> list[User]:
        """Consulta el repositorio; propaga ``FetchError``.

        Es la parte que se ejecuta fuera del hilo de la interfaz.
        """

        return self._repository.obtener_lote(cantidad)

    def absorber_fallo(self, error: FetchError, accion: Accion = Accion.CARGA) -> list[User]:
        """Registra y notifica el fallo; devuelve un lote vacío."""

        if isinstance(error, RateLimitedError):
            logger.warning("Límite de solicitudes alcanzado (%s): %s", accion.value, error)
            titulo, mensaje = MENSAJES_LIMITE[accion]
        else:
            logger.error("Error obteniendo usuarios (%s): %s", accion.value, error)
            titulo, mensaje = MENSAJES_ERROR[accion]
        self._notificador.notificar(titulo, mensaje)
        return []

    def obtener_lote(self, cantidad: int, accion: Accion = Accion.CARGA) -> list[User]:
        """Devuelve ``cantidad`` usuarios, o una lista vacía si la consulta falla.

        Versión síncrona del contrato de consulta, para quien no necesita un
        hilo aparte. ``ScreenController`` usa sus dos mitades por separado:
        ``descargar`` en el hilo de la consulta y ``absorber_fallo`` en el de
        la interfaz, donde puede mostrarse el aviso.
        """

        try:
            return self.descargar(cantidad)
        except FetchError as exc:
            return self.absorber_fallo(exc, accion)


__all__ = ["Accion", "MENSAJES_ERROR", "MENSAJES_LIMITE", "Notificador", "UserService"]
