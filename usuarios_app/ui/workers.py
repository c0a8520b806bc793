"""Ejecución de consultas en hilos ``QThread``.

Cada consulta corre en su propio hilo; el resultado vuelve al hilo de la
interfaz mediante señales encoladas hacia ``QtTaskRunner``.
"""

from __future__ import annotations

from itertools import count
from typing import Callable, Dict, Tuple

from PyQt6.QtCore import QDeadlineTimer, QObject, QThread, pyqtSignal, pyqtSlot

from usuarios_app.core.errors import FetchError
from usuarios_app.utils.logger import get_logger

logger = get_logger(__name__)


class _FetchWorker(QObject):
    finished = pyqtSignal(int, object)
    error = pyqtSignal(int, object)

    def __init__(self, token: int, tarea: Callable[[], object]) -> None:
        super().__init__()
        self.token = token
        self.tarea = tarea

    @pyqtSlot()
    def run(self) -> None:
        try:
            resultado = self.tarea()
        except FetchError as exc:
            self.error.emit(self.token, exc)
            return
        except Exception as exc:  # pragma: no cover - mostrado en UI
            logger.exception("Fallo inesperado en la consulta %d", self.token)
            self.error.emit(self.token, FetchError(str(exc)))
            return
        self.finished.emit(self.token, resultado)


_Pendiente = Tuple[QThread, _FetchWorker, Callable, Callable]


class QtTaskRunner(QObject):
    """Lanza un ``_FetchWorker`` por tarea y entrega el resultado en el hilo principal."""

    # espera máxima total al cerrar la ventana, compartida por todos los hilos
    ESPERA_CIERRE_MS = 3000

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._tokens = count(1)
        self._pendientes: Dict[int, _Pendiente] = {}
        self._abandonados: Dict[int, Tuple[QThread, _FetchWorker]] = {}

    @property
    def en_curso(self) -> int:
        return len(self._pendientes)

    @property
    def abandonados(self) -> int:
        return len(self._abandonados)

    def ejecutar(self, tarea, al_exito, al_fallo) -> None:
        token = next(self._tokens)
        thread = QThread()
        worker = _FetchWorker(token, tarea)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        worker.finished.connect(self._on_finished)
        worker.error.connect(self._on_error)

        self._pendientes[token] = (thread, worker, al_exito, al_fallo)
        logger.debug("Consulta %d iniciada (%d en curso)", token, self.en_curso)
        thread.start()

    def detener(self) -> None:
        """Abandona las consultas en curso.

        Todos los hilos comparten un único plazo de ``ESPERA_CIERRE_MS``; los
        que no terminan a tiempo se conservan hasta que emiten ``finished``.
        """

        pendientes = list(self._pendientes.values())
        self._pendientes.clear()
        for thread, worker, _, _ in pendientes:
            worker.finished.disconnect(self._on_finished)
            worker.error.disconnect(self._on_error)
            thread.quit()

        plazo = QDeadlineTimer(self.ESPERA_CIERRE_MS)
        for thread, worker, _, _ in pendientes:
            if not thread.wait(plazo):
                self._abandonar(thread, worker)
        if self._abandonados:
            logger.warning("%d consultas no terminaron antes del cierre", self.abandonados)

    def finalizar(self, espera_ms: int | None = None) -> None:
        """Último paso antes de salir del proceso.

        Espera a los hilos abandonados hasta el plazo y termina los que sigan
        corriendo; un QThread destruido en ejecución aborta el proceso.
        """

        self.detener()
        plazo = QDeadlineTimer(self.ESPERA_CIERRE_MS if espera_ms is None else espera_ms)
        for clave, (thread, worker) in list(self._abandonados.items()):
            if not thread.wait(plazo):
                logger.warning("Terminando una consulta colgada al salir")
                thread.terminate()
                thread.wait()
            del self._abandonados[clave]

    def _abandonar(self, thread: QThread, worker: _FetchWorker) -> None:
        self._abandonados[id(thread)] = (thread, worker)
        thread.finished.connect(self._liberar_abandonados)
        # pudo terminar entre el plazo y la conexión
        if thread.isFinished():
            self._liberar_abandonados()

    @pyqtSlot()
    def _liberar_abandonados(self) -> None:
        for clave, (thread, worker) in list(self._abandonados.items()):
            if thread.isFinished():
                del self._abandonados[clave]
                worker.deleteLater()
                thread.deleteLater()

    @pyqtSlot(int, object)
    def _on_finished(self, token: int, resultado: object) -> None:
        pendiente = self._liberar(token)
        if pendiente is not None:
            pendiente[2](resultado)

    @pyqtSlot(int, object)
    def _on_error(self, token: int, error: object) -> None:
        pendiente = self._liberar(token)
        if pendiente is not None:
            pendiente[3](error)

    def _liberar(self, token: int) -> _Pendiente | None:
        pendiente = self._pendientes.pop(token, None)
        if pendiente is None:
            return None
        thread, worker, _, _ = pendiente
        thread.wait()
        worker.deleteLater()
        thread.deleteLater()
        return pendiente


__all__ = ["QtTaskRunner"]
