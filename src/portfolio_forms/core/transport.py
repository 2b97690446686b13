"""
Transportes de envío de formularios.

El controlador solo necesita `await transport.submit(payload)`: termina
sin error si el envío fue aceptado, o lanza `TransportError`.
"""

import logging
from typing import Any, Awaitable, Callable, Optional, Protocol

import httpx


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class TransportError(Exception):
    """El envío no fue confirmado (red, timeout o respuesta de error)."""


class Transport(Protocol):
    """Interfaz de envío asíncrono, un solo intento."""

    async def submit(self, payload: dict[str, str]) -> None:
        ...


class HttpTransport:
    """Envía el payload como JSON por POST (Formspree, Netlify Forms, API propia)."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client

    async def submit(self, payload: dict[str, str]) -> None:
        headers = {"Accept": "application/json"}
        try:
            if self._client is not None:
                response = await self._client.post(
                    self.endpoint, json=payload, headers=headers, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.endpoint, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout enviando a {self.endpoint}") from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Respuesta {e.response.status_code} de {self.endpoint}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Error de red: {e}") from e

        logger.debug("POST %s -> %s", self.endpoint, response.status_code)


class MemoryTransport:
    """Guarda los payloads en memoria; útil para simulaciones y tests."""

    def __init__(self, fail: bool = False, error_message: str = "Submission failed") -> None:
        self.fail = fail
        self.error_message = error_message
        self.payloads: list[dict[str, str]] = []

    @property
    def calls(self) -> int:
        return len(self.payloads)

    async def submit(self, payload: dict[str, str]) -> None:
        self.payloads.append(dict(payload))
        logger.info("Form data: %s", payload)
        if self.fail:
            raise TransportError(self.error_message)


class CallableTransport:
    """Adapta una función asíncrona cualquiera a la interfaz de transporte."""

    def __init__(self, func: Callable[[dict[str, str]], Awaitable[Any]]) -> None:
        self.func = func

    async def submit(self, payload: dict[str, str]) -> None:
        try:
            result = await self.func(payload)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(str(e) or type(e).__name__) from e
        if result is False:
            raise TransportError("El envío fue rechazado")
