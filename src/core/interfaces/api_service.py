"""Contrato del ejecutor de endpoints.

Por qué Protocol:
- La fachada (`core.services.remote_api`) depende de esta abstracción y no de
  httpx; en tests se sustituye por un stub que cuenta llamadas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.endpoints import Endpoint, Reply
from core.domain.models import WireModel


@runtime_checkable
class ApiService(Protocol):
    """Contrato mínimo para ejecutar un descriptor.

    Reglas de diseño:
    - `call` es asíncrono porque hace I/O (HTTP).
    - Los errores de transporte se propagan; la fachada los convierte en `Failure`.
    """

    async def call(
        self,
        endpoint: Endpoint,
        *,
        body: WireModel | None = None,
        item_id: str | None = None,
    ) -> Reply:
        """Ejecuta `endpoint` y devuelve la respuesta decodificada."""

        ...
