"""Cliente HTTP del servicio de usuarios aleatorios.

Encapsula la única petición que necesita la aplicación y traduce los fallos
de transporte a los errores de ``usuarios_app.core.errors``.
"""

from __future__ import annotations

import json
import socket
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from usuarios_app.core.errors import FetchError, RateLimitedError
from usuarios_app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_API_BASE = "https://random-data-api.com"
RANDOM_USER_PATH = "/api/users/random_user"


class APIClient:
    """Provee acceso a los perfiles generados por el servicio remoto."""

    def __init__(self, api_base: str = DEFAULT_API_BASE, timeout: Optional[float] = None) -> None:
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def url_usuarios(self, cantidad: int) -> str:
        return f"{self.api_base}{RANDOM_USER_PATH}?{urlencode({'size': cantidad})}"

    def obtener_usuarios_aleatorios(self, cantidad: int) -> list[dict]:
        """Recupera ``cantidad`` usuarios del servicio.

        Levanta ``RateLimitedError`` ante HTTP 429 y ``FetchError`` ante
        cualquier otro fallo de red, de estado o de formato.
        """

        url = self.url_usuarios(cantidad)
        logger.debug("GET %s", url)
        request = Request(url, headers={"Accept": "application/json"})

        kwargs = {} if self.timeout is None else {"timeout": self.timeout}
        try:
            with urlopen(request, **kwargs) as response:
                raw_data = response.read()
        except HTTPError as exc:
            if exc.code == 429:
                raise RateLimitedError() from exc
            raise FetchError(f"Error HTTP {exc.code} consultando usuarios", status=exc.code) from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise FetchError("La consulta de usuarios expiró por timeout") from exc
            raise FetchError(f"No se pudo conectar al servicio: {exc.reason}") from exc
        except OSError as exc:
            raise FetchError(f"Fallo de red consultando usuarios: {exc}") from exc

        try:
            payload = json.loads(raw_data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FetchError("La respuesta del servicio no es JSON válido") from exc

        # con size=1 algunas versiones del servicio devuelven un objeto suelto
        if isinstance(payload, dict):
            return [payload]
        if not isinstance(payload, list):
            raise FetchError("Formato inesperado al leer usuarios")
        return payload


__all__ = ["APIClient", "DEFAULT_API_BASE", "RANDOM_USER_PATH"]
