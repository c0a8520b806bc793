"""Ejecución de consultas fuera del hilo de la interfaz."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from usuarios_app.core.errors import FetchError

T = TypeVar("T")


class TaskRunner(Protocol):
    """Ejecuta ``tarea`` y entrega el resultado en el hilo de la interfaz.

    ``al_exito`` recibe el valor devuelto; ``al_fallo`` recibe el
    ``FetchError`` levantado. Nunca se llaman ambos.
    """

    def ejecutar(
        self,
        tarea: Callable[[], T],
        al_exito: Callable[[T], None],
        al_fallo: Callable[[FetchError], None],
    ) -> None: ...

    def detener(self) -> None: ...


class SyncRunner:
    """Ejecuta las tareas en línea; útil en pruebas y scripts."""

    def ejecutar(self, tarea, al_exito, al_fallo) -> None:
        try:
            resultado = tarea()
        except FetchError as exc:
            al_fallo(exc)
            return
        al_exito(resultado)

    def detener(self) -> None:
        pass


__all__ = ["SyncRunner", "TaskRunner"]
