"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from usuarios_app.core.errors import FetchError
from usuarios_app.infrastructure.api_client import APIClient
from usuarios_app.models.user import User


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def obtener_lote(self, cantidad: int) -> list[User]:
        """Devuelve un lote de ``cantidad`` usuarios en el orden de la API."""

        usuarios_crudos = self._api_client.obtener_usuarios_aleatorios(cantidad)
        try:
            return [User.from_api(datos) for datos in usuarios_crudos]
        except (KeyError, TypeError) as exc:
            raise FetchError(f"Usuario con formato inesperado ({exc})") from exc


__all__ = ["UserRepository"]
