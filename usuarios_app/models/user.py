"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class User:
    """Perfil de usuario tal como lo devuelve el servicio de datos aleatorios.

    ``datos`` conserva el objeto JSON original sin modificar; los demás campos
    son los únicos que la pantalla utiliza.
    """

    id: Any
    first_name: str
    last_name: str
    avatar: str
    datos: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, datos: Mapping[str, Any]) -> "User":
        """Construye el usuario desde un objeto de la API.

        Levanta ``KeyError`` si falta un campo obligatorio y ``TypeError`` si
        ``datos`` no es un objeto.
        """

        if not isinstance(datos, Mapping):
            raise TypeError(f"Se esperaba un objeto de usuario, no {type(datos).__name__}")
        return cls(
            id=datos["id"],
            first_name=str(datos["first_name"] or ""),
            last_name=str(datos["last_name"] or ""),
            avatar=str(datos.get("avatar") or ""),
            datos=dict(datos),
        )

    @property
    def clave(self) -> str:
        return str(self.id)

    @property
    def nombre_completo(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def iniciales(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()


__all__ = ["User"]
