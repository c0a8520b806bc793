"""Modelos de vista de las filas de la lista."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from usuarios_app.models.user import User
from usuarios_app.ui.avatars import AvatarRenderer, AvatarVista


@dataclass(frozen=True, slots=True)
class FilaUsuario:
    clave: str
    nombre: str
    avatar: AvatarVista


def construir_filas(usuarios: Iterable[User], avatar_renderer: AvatarRenderer) -> List[FilaUsuario]:
    """Genera una fila por usuario, en el mismo orden.

    La clave es el identificador del usuario. Si un identificador se repite
    (por ejemplo, un usuario agregado que ya estaba en el lote) las apariciones
    siguientes reciben el sufijo ``#n`` para que las claves sigan siendo únicas.
    """

    vistas: dict[str, int] = {}
    filas: List[FilaUsuario] = []
    for usuario in usuarios:
        clave = usuario.clave
        repeticiones = vistas.get(clave, 0)
        vistas[clave] = repeticiones + 1
        if repeticiones:
            clave = f"{clave}#{repeticiones}"
        filas.append(
            FilaUsuario(
                clave=clave,
                nombre=usuario.nombre_completo,
                avatar=avatar_renderer.vista(usuario),
            )
        )
    return filas


__all__ = ["FilaUsuario", "construir_filas"]
