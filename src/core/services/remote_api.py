"""Fachada de la API Taskie.

Este módulo es el único punto que la aplicación llama directamente. Cada
operación es una corrutina que emite exactamente una request (dos, y en
orden, para el perfil) y resuelve exactamente una vez con un `Result`:
ningún error de transporte o de decodificación escapa al llamador.

Política para la lista de tareas: una lista nula o vacía es un fallo
"No data available"; una lista con todas las tareas completadas es un
éxito con lista vacía.
"""

from __future__ import annotations

from typing import assert_never

from core.domain.endpoints import (
    ADD_TASK,
    COMPLETE_TASK,
    DELETE_TASK,
    GET_PROFILE,
    LIST_TASKS,
    LOGIN,
    REGISTER,
    Endpoint,
    Reply,
)
from core.domain.errors import MissingBodyError
from core.domain.models import (
    AddTaskRequest,
    GetTasksResponse,
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    Task,
    UserDataRequest,
    UserProfile,
    UserProfileResponse,
    WireModel,
)
from core.domain.result import Failure, Result, Success
from core.domain.session import Session
from core.interfaces.api_service import ApiService
from core.logger import get_logger

log = get_logger(__name__)


class RemoteApi:
    """Operaciones de alto nivel sobre el backend Taskie."""

    def __init__(self, service: ApiService, session: Session | None = None) -> None:
        self._service = service
        self._session = session if session is not None else Session()

    @property
    def session(self) -> Session:
        return self._session

    async def _exchange(
        self,
        endpoint: Endpoint,
        *,
        body: WireModel | None = None,
        item_id: str | None = None,
    ) -> Result[Reply]:
        try:
            reply = await self._service.call(endpoint, body=body, item_id=item_id)
        except Exception as exc:
            log.warning("request_failed", endpoint=endpoint.name, error=repr(exc))
            return Failure(exc)
        return Success(reply)

    async def login(self, credentials: UserDataRequest) -> Result[str]:
        outcome = await self._exchange(LOGIN, body=credentials)
        match outcome:
            case Failure():
                return outcome
            case Success(value=reply):
                body = reply.body
                token = body.token if isinstance(body, LoginResponse) else None
                if not token:
                    return Failure(MissingBodyError("No response body", status_code=reply.error_status))
                self._session.token = token
                return Success(token)
            case _:
                assert_never(outcome)

    async def register(self, credentials: UserDataRequest) -> Result[str]:
        outcome = await self._exchange(REGISTER, body=credentials)
        match outcome:
            case Failure():
                return outcome
            case Success(value=reply):
                body = reply.body
                message = body.message if isinstance(body, RegisterResponse) else None
                if message is None:
                    return Failure(MissingBodyError("No response body", status_code=reply.error_status))
                return Success(message)
            case _:
                assert_never(outcome)

    async def list_tasks(self) -> Result[list[Task]]:
        outcome = await self._exchange(LIST_TASKS)
        match outcome:
            case Failure():
                return outcome
            case Success(value=reply):
                body = reply.body
                notes = body.notes if isinstance(body, GetTasksResponse) else None
                if not notes:
                    return Failure(MissingBodyError("No data available", status_code=reply.error_status))
                return Success([task for task in notes if not task.is_completed])
            case _:
                assert_never(outcome)

    async def _message_call(self, endpoint: Endpoint, task_id: str) -> Result[str]:
        outcome = await self._exchange(endpoint, item_id=task_id)
        match outcome:
            case Failure():
                return outcome
            case Success(value=reply):
                body = reply.body
                message = body.message if isinstance(body, MessageResponse) else None
                if message is None:
                    return Failure(MissingBodyError("No response", status_code=reply.error_status))
                return Success(message)
            case _:
                assert_never(outcome)

    async def delete_task(self, task_id: str) -> Result[str]:
        return await self._message_call(DELETE_TASK, task_id)

    async def complete_task(self, task_id: str) -> Result[str]:
        return await self._message_call(COMPLETE_TASK, task_id)

    async def add_task(self, request: AddTaskRequest) -> Result[Task]:
        outcome = await self._exchange(ADD_TASK, body=request)
        match outcome:
            case Failure():
                return outcome
            case Success(value=reply):
                if not isinstance(reply.body, Task):
                    return Failure(MissingBodyError("No response", status_code=reply.error_status))
                return Success(reply.body)
            case _:
                assert_never(outcome)

    async def get_user_profile(self) -> Result[UserProfile]:
        """Perfil + número de tareas abiertas.

        Primero lista las tareas; si falla, se devuelve ese mismo `Failure` y el
        endpoint de perfil no se llega a llamar.
        """

        tasks_result = await self.list_tasks()
        match tasks_result:
            case Failure():
                return tasks_result
            case Success(value=tasks):
                pass
            case _:
                assert_never(tasks_result)

        outcome = await self._exchange(GET_PROFILE)
        match outcome:
            case Failure():
                return outcome
            case Success(value=reply):
                body = reply.body
                if not isinstance(body, UserProfileResponse) or body.email is None or body.name is None:
                    return Failure(MissingBodyError("No data", status_code=reply.error_status))
                return Success(
                    UserProfile(
                        email=body.email,
                        name=body.name,
                        number_of_notes=len(tasks),
                    )
                )
            case _:
                assert_never(outcome)
