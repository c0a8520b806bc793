"""Configuración de la aplicación.

Los valores por defecto reproducen el comportamiento esperado de la pantalla;
``main`` construye la configuración y la reparte a cada componente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ESTILOS_AVATAR = ("iniciales", "imagen")


@dataclass(frozen=True)
class AppConfig:
    """Parámetros de red y de la pantalla de usuarios."""

    api_base: str = "https://random-data-api.com"
    tamano_lote: int = 10
    cooldown_refresco: float = 10.0
    # None deja el timeout por defecto del transporte
    timeout: Optional[float] = None
    # None elige el estilo según la plataforma
    estilo_avatar: Optional[str] = None
    nivel_log: str = "INFO"

    def __post_init__(self) -> None:
        if self.tamano_lote < 1:
            raise ValueError("tamano_lote debe ser mayor que cero")
        if self.cooldown_refresco < 0:
            raise ValueError("cooldown_refresco no puede ser negativo")
        if self.estilo_avatar is not None and self.estilo_avatar not in ESTILOS_AVATAR:
            raise ValueError(
                f"estilo_avatar debe ser uno de {', '.join(ESTILOS_AVATAR)}: {self.estilo_avatar!r}"
            )


__all__ = ["AppConfig", "ESTILOS_AVATAR"]
