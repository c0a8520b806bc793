"""Estado de la pantalla de usuarios.

``AppState`` es el único contenedor mutable de la aplicación. Cada transición
reemplaza la instantánea ``EstadoPantalla`` por una nueva; la interfaz solo
recibe instantáneas inmutables.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from usuarios_app.models.user import User


class Fase(Enum):
    CARGANDO = "cargando"
    LISTO = "listo"


@dataclass(frozen=True)
class EstadoPantalla:
    """Instantánea de lo que la pantalla debe mostrar."""

    usuarios: Tuple[User, ...] = ()
    cargando: bool = True
    refrescando: bool = False
    ultimo_refresco: Optional[float] = None

    @property
    def fase(self) -> Fase:
        return Fase.CARGANDO if self.cargando else Fase.LISTO


class AppState:
    """Mantiene la instantánea actual y aplica las transiciones."""

    def __init__(self, inicial: EstadoPantalla | None = None) -> None:
        self._estado = inicial or EstadoPantalla()

    @property
    def actual(self) -> EstadoPantalla:
        return self._estado

    def puede_refrescar(self, ahora: float, cooldown: float) -> bool:
        ultimo = self._estado.ultimo_refresco
        return ultimo is None or (ahora - ultimo) >= cooldown

    def completar_carga(self, usuarios: Iterable[User]) -> EstadoPantalla:
        self._estado = replace(self._estado, usuarios=tuple(usuarios), cargando=False)
        return self._estado

    def iniciar_refresco(self, ahora: float) -> EstadoPantalla:
        self._estado = replace(self._estado, refrescando=True, ultimo_refresco=ahora)
        return self._estado

    def completar_refresco(self, usuarios: Iterable[User]) -> EstadoPantalla:
        self._estado = replace(self._estado, usuarios=tuple(usuarios), refrescando=False)
        return self._estado

    def anteponer(self, usuario: User) -> EstadoPantalla:
        self._estado = replace(self._estado, usuarios=(usuario, *self._estado.usuarios))
        return self._estado


__all__ = ["AppState", "EstadoPantalla", "Fase"]
