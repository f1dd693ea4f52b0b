"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers, autorización y logging HTTP.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import json
from typing import Any, Generator

import httpx

from core.config import AppSettings
from core.domain.session import Session
from core.logger import get_logger

HEADER_AUTHORIZATION = "Authorization"

# Claves JSON que nunca se escriben en los logs.
SENSITIVE_KEYS = frozenset({"token", "password"})
REDACTED = "***"


class SessionTokenAuth(httpx.Auth):
    """Adjunta `Authorization: <token>` cuando la sesión tiene token.

    Con token vacío o en blanco la request sale tal cual; el backend decide.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self._session.is_authenticated:
            request.headers[HEADER_AUTHORIZATION] = self._session.token
        yield request


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if key.lower() in SENSITIVE_KEYS else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_redact(item) for item in value]
    return value


def redact_body(content: bytes) -> str:
    """Cuerpo listo para log: JSON con `token`/`password` enmascarados."""

    text = content.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except ValueError:
        return text
    return json.dumps(_redact(data), ensure_ascii=False)


def _build_log_hooks(*, log_bodies: bool) -> dict[str, list[Any]]:
    log = get_logger("taskie.http")

    async def log_request(request: httpx.Request) -> None:
        log.info("http_request", method=request.method, url=str(request.url))
        if not log_bodies:
            return
        try:
            content = request.content
        except httpx.RequestNotRead:
            return
        if content:
            log.debug("http_request_body", body=redact_body(content))

    async def log_response(response: httpx.Response) -> None:
        request = response.request
        log.info(
            "http_response",
            method=request.method,
            url=str(request.url),
            status=response.status_code,
        )
        if log_bodies:
            await response.aread()
            log.debug("http_response_body", body=redact_body(response.content))

    return {"request": [log_request], "response": [log_response]}


def build_async_client(
    settings: AppSettings | None = None,
    *,
    session: Session | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando al backend Taskie.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las operaciones se comporten igual.
    - La sesión se pasa explícitamente; el hook de auth la lee en cada request.
    """

    settings = settings or AppSettings()
    session = session if session is not None else Session(token=settings.token)
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        auth=SessionTokenAuth(session),
        event_hooks=_build_log_hooks(log_bodies=settings.log_http_bodies),
        transport=transport,
    )
