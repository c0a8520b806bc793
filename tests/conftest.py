"""Fixtures compartidas por las pruebas."""

import os

# sin pantalla en CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from collections import deque

import pytest

from usuarios_app.core.errors import FetchError
from usuarios_app.models.user import User


def hacer_usuario(id, first_name="Ana", last_name="García"):
    return User.from_api(
        {
            "id": id,
            "uid": f"uid-{id}",
            "first_name": first_name,
            "last_name": last_name,
            "avatar": f"https://robohash.org/{id}.png",
            "email": f"user{id}@example.com",
        }
    )


def hacer_lote(cantidad, inicio=1):
    return [hacer_usuario(i, f"Nombre{i}", f"Apellido{i}") for i in range(inicio, inicio + cantidad)]


class FakeNotificador:
    def __init__(self):
        self.avisos = []

    def notificar(self, titulo, mensaje):
        self.avisos.append((titulo, mensaje))


class FakeRepository:
    """Devuelve las respuestas encoladas en orden; una excepción se levanta."""

    def __init__(self, *respuestas):
        self.respuestas = deque(respuestas)
        self.llamadas = []

    def obtener_lote(self, cantidad):
        self.llamadas.append(cantidad)
        if not self.respuestas:
            return hacer_lote(cantidad, inicio=1000 + len(self.llamadas) * 100)
        respuesta = self.respuestas.popleft()
        if isinstance(respuesta, FetchError):
            raise respuesta
        return respuesta


class FakeReloj:
    def __init__(self, ahora=1000.0):
        self.ahora = ahora

    def __call__(self):
        return self.ahora

    def avanzar(self, segundos):
        self.ahora += segundos


class DeferredRunner:
    """Guarda las tareas y las resuelve cuando la prueba lo indica."""

    def __init__(self):
        self.pendientes = []
        self.detenido = False

    def ejecutar(self, tarea, al_exito, al_fallo):
        self.pendientes.append((tarea, al_exito, al_fallo))

    def resolver(self, indice=0):
        tarea, al_exito, al_fallo = self.pendientes.pop(indice)
        try:
            resultado = tarea()
        except FetchError as exc:
            al_fallo(exc)
            return
        al_exito(resultado)

    def detener(self):
        self.detenido = True


@pytest.fixture
def notificador():
    return FakeNotificador()


@pytest.fixture
def reloj():
    return FakeReloj()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
