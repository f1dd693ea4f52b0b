"""Ejecutor HTTP de los descriptores de endpoints.

Implementación:
- Traduce un `Endpoint` a una request httpx (método, ruta, query, JSON).
- Decodifica el cuerpo con el modelo declarado (tolerante a campos extra).

Notas:
- Respuesta no-2xx o sin cuerpo => `Reply.body is None` (como un body nulo).
- Errores de red/timeout y JSON inválido se propagan al llamador.
"""

from __future__ import annotations

import httpx

from core.domain.endpoints import Endpoint, Reply
from core.domain.models import WireModel
from core.interfaces.api_service import ApiService
from core.logger import get_logger

log = get_logger(__name__)


def decode_reply(endpoint: Endpoint, response: httpx.Response) -> Reply:
    if not response.is_success:
        log.warning(
            "endpoint_http_error",
            endpoint=endpoint.name,
            status=response.status_code,
        )
        return Reply(status_code=response.status_code)

    if not response.content.strip():
        return Reply(status_code=response.status_code)

    data = response.json()
    if data is None:
        return Reply(status_code=response.status_code)
    return Reply(
        status_code=response.status_code,
        body=endpoint.response_model.model_validate(data),
    )


class RemoteApiService(ApiService):
    """Ejecuta descriptores sobre un `httpx.AsyncClient` ya configurado."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def call(
        self,
        endpoint: Endpoint,
        *,
        body: WireModel | None = None,
        item_id: str | None = None,
    ) -> Reply:
        if endpoint.request_model is None and body is not None:
            raise ValueError(f"{endpoint.name} does not accept a request body")
        if endpoint.request_model is not None and not isinstance(body, endpoint.request_model):
            raise ValueError(
                f"{endpoint.name} requires a {endpoint.request_model.__name__} body"
            )

        params: dict[str, str] | None = None
        if endpoint.query_param is not None:
            if not item_id:
                raise ValueError(f"{endpoint.name} requires '{endpoint.query_param}'")
            params = {endpoint.query_param: item_id}
        elif item_id is not None:
            raise ValueError(f"{endpoint.name} does not take an id")

        payload = None
        if body is not None:
            payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)

        log.debug("endpoint_call", endpoint=endpoint.name, auth=endpoint.requires_auth)
        response = await self._client.request(
            endpoint.method,
            endpoint.path,
            params=params,
            json=payload,
        )
        return decode_reply(endpoint, response)
