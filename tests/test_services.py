"""Pruebas de ``UserService``: absorción de fallos y avisos."""

from conftest import FakeRepository, hacer_lote

from usuarios_app.core.errors import FetchError, RateLimitedError
from usuarios_app.core.services import MENSAJES_ERROR, MENSAJES_LIMITE, Accion, UserService


class TestObtenerLote:
    def test_success_returns_batch_without_notifying(self, notificador):
        lote = hacer_lote(10)
        service = UserService(FakeRepository(lote), notificador)

        assert service.obtener_lote(10) == lote
        assert notificador.avisos == []

    def test_rate_limit_notifies_specific_message(self, notificador):
        service = UserService(FakeRepository(RateLimitedError()), notificador)

        assert service.obtener_lote(10) == []
        assert notificador.avisos == [MENSAJES_LIMITE[Accion.CARGA]]

    def test_generic_failure_notifies_generic_message(self, notificador):
        service = UserService(FakeRepository(FetchError("boom", status=500)), notificador)

        assert service.obtener_lote(10) == []
        assert notificador.avisos == [MENSAJES_ERROR[Accion.CARGA]]

    def test_add_action_uses_its_own_messages(self, notificador):
        repository = FakeRepository(RateLimitedError(), FetchError("boom"))
        service = UserService(repository, notificador)

        service.obtener_lote(1, Accion.AGREGAR)
        service.obtener_lote(1, Accion.AGREGAR)

        assert notificador.avisos == [
            MENSAJES_LIMITE[Accion.AGREGAR],
            MENSAJES_ERROR[Accion.AGREGAR],
        ]
        assert repository.llamadas == [1, 1]

    def test_rate_limit_and_generic_messages_differ(self):
        for accion in Accion:
            assert MENSAJES_LIMITE[accion] != MENSAJES_ERROR[accion]

    def test_no_retry_after_failure(self, notificador):
        repository = FakeRepository(FetchError("boom"))
        UserService(repository, notificador).obtener_lote(10)
        assert repository.llamadas == [10]
