"""Descriptores de endpoints del backend Taskie.

Por qué declarativo:
- Cada operación REST es un dato (método, ruta, auth, query, modelos); el
  adaptador HTTP los ejecuta todos con el mismo código.
- Aquí no hay lógica: solo la forma del contrato.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.models import (
    AddTaskRequest,
    GetTasksResponse,
    LoginResponse,
    MessageResponse,
    RegisterResponse,
    Task,
    UserDataRequest,
    UserProfileResponse,
    WireModel,
)


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    response_model: type[WireModel]
    requires_auth: bool = False
    request_model: type[WireModel] | None = None
    query_param: str | None = None


@dataclass(frozen=True)
class Reply:
    """Respuesta decodificada: código HTTP + cuerpo (o `None` si no hay)."""

    status_code: int
    body: WireModel | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error_status(self) -> int | None:
        """Código HTTP si la respuesta no fue 2xx; si no, `None`."""

        return None if self.is_success else self.status_code


LOGIN = Endpoint(
    name="login",
    method="POST",
    path="/api/login",
    response_model=LoginResponse,
    request_model=UserDataRequest,
)
REGISTER = Endpoint(
    name="register",
    method="POST",
    path="/api/register",
    response_model=RegisterResponse,
    request_model=UserDataRequest,
)
LIST_TASKS = Endpoint(
    name="list_tasks",
    method="GET",
    path="/api/note",
    response_model=GetTasksResponse,
    requires_auth=True,
)
GET_PROFILE = Endpoint(
    name="get_profile",
    method="GET",
    path="/api/user/profile",
    response_model=UserProfileResponse,
    requires_auth=True,
)
COMPLETE_TASK = Endpoint(
    name="complete_task",
    method="POST",
    path="/api/note/complete",
    response_model=MessageResponse,
    requires_auth=True,
    query_param="id",
)
ADD_TASK = Endpoint(
    name="add_task",
    method="POST",
    path="/api/note",
    response_model=Task,
    requires_auth=True,
    request_model=AddTaskRequest,
)
DELETE_TASK = Endpoint(
    name="delete_task",
    method="DELETE",
    path="/api/note",
    response_model=MessageResponse,
    requires_auth=True,
    query_param="id",
)

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (
        LOGIN,
        REGISTER,
        LIST_TASKS,
        GET_PROFILE,
        COMPLETE_TASK,
        ADD_TASK,
        DELETE_TASK,
    )
}
