"""Pruebas del cliente HTTP con ``urlopen`` simulado."""

import json
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest

from usuarios_app.core.errors import FetchError, RateLimitedError
from usuarios_app.infrastructure.api_client import APIClient

URLOPEN = "usuarios_app.infrastructure.api_client.urlopen"


def _respuesta(cuerpo: bytes) -> MagicMock:
    response = MagicMock()
    response.__enter__.return_value.read.return_value = cuerpo
    return response


def _http_error(code: int) -> HTTPError:
    return HTTPError("https://example.test", code, "error", hdrs=None, fp=None)


class TestObtenerUsuariosAleatorios:
    def test_builds_size_url_and_parses_list(self):
        datos = [{"id": 1, "first_name": "Ana", "last_name": "Paz", "avatar": "a.png"}]
        with patch(URLOPEN, return_value=_respuesta(json.dumps(datos).encode())) as mock_urlopen:
            resultado = APIClient("https://random-data-api.com/").obtener_usuarios_aleatorios(10)

        assert resultado == datos
        request = mock_urlopen.call_args.args[0]
        assert request.full_url == "https://random-data-api.com/api/users/random_user?size=10"
        assert request.get_method() == "GET"
        assert request.get_header("Accept") == "application/json"

    def test_no_timeout_by_default(self):
        with patch(URLOPEN, return_value=_respuesta(b"[]")) as mock_urlopen:
            APIClient().obtener_usuarios_aleatorios(1)
        assert "timeout" not in mock_urlopen.call_args.kwargs

    def test_configured_timeout_is_passed(self):
        with patch(URLOPEN, return_value=_respuesta(b"[]")) as mock_urlopen:
            APIClient(timeout=5.0).obtener_usuarios_aleatorios(1)
        assert mock_urlopen.call_args.kwargs["timeout"] == 5.0

    def test_single_object_is_wrapped(self):
        datos = {"id": 42, "first_name": "Ana", "last_name": "Paz", "avatar": ""}
        with patch(URLOPEN, return_value=_respuesta(json.dumps(datos).encode())):
            assert APIClient().obtener_usuarios_aleatorios(1) == [datos]

    def test_429_raises_rate_limited(self):
        with patch(URLOPEN, side_effect=_http_error(429)):
            with pytest.raises(RateLimitedError) as info:
                APIClient().obtener_usuarios_aleatorios(10)
        assert info.value.status == 429

    def test_other_http_status_raises_fetch_error(self):
        with patch(URLOPEN, side_effect=_http_error(503)):
            with pytest.raises(FetchError) as info:
                APIClient().obtener_usuarios_aleatorios(10)
        assert not isinstance(info.value, RateLimitedError)
        assert info.value.status == 503

    def test_connection_error_raises_fetch_error(self):
        with patch(URLOPEN, side_effect=URLError("Name or service not known")):
            with pytest.raises(FetchError):
                APIClient().obtener_usuarios_aleatorios(10)

    def test_invalid_json_raises_fetch_error(self):
        with patch(URLOPEN, return_value=_respuesta(b"<html>oops</html>")):
            with pytest.raises(FetchError):
                APIClient().obtener_usuarios_aleatorios(10)

    def test_unexpected_payload_raises_fetch_error(self):
        with patch(URLOPEN, return_value=_respuesta(b'"texto"')):
            with pytest.raises(FetchError):
                APIClient().obtener_usuarios_aleatorios(10)
