"""Errores de acceso al servicio de usuarios aleatorios.

Los errores se levantan en la capa de infraestructura y se absorben en
``UserService``; nunca deben llegar a la interfaz como excepciones sin
manejar.
"""

from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """Fallo de transporte, del servidor o de formato de la respuesta."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.message = message
        self.status = status
        super().__init__(message)


class RateLimitedError(FetchError):
    """El servicio respondió HTTP 429 (demasiadas solicitudes)."""

    def __init__(self, message: str = "Demasiadas solicitudes") -> None:
        super().__init__(message, status=429)


__all__ = ["FetchError", "RateLimitedError"]
