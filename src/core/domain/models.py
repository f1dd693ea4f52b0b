"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `extra="ignore"` da el parseo tolerante que exige el backend: campos
  desconocidos en las respuestas nunca provocan fallo.

Nota:
- Los nombres de campo son snake_case; el alias es el nombre en el JSON.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict


class WireModel(BaseModel):
    """Base común para todo lo que viaja por la red."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class UserDataRequest(WireModel):
    """Credenciales para login/registro (solo entrada, nunca se persisten)."""

    email: str = Field(..., min_length=1, description="Email del usuario.")
    password: str = Field(..., min_length=1, description="Contraseña en claro.")
    name: str | None = Field(
        default=None,
        description="Nombre visible (solo lo usa el registro).",
    )


class AddTaskRequest(WireModel):
    title: str = Field(..., min_length=1, description="Título de la tarea.")
    content: str = Field(default="", description="Descripción libre.")
    task_priority: int = Field(
        default=1,
        ge=1,
        le=3,
        alias="taskPriority",
        description="Prioridad (1 = baja, 3 = alta).",
    )


class Task(WireModel):
    """Tarea (nota) tal y como la devuelve el backend.

    Ciclo de vida: se crea con `add`, se marca con `complete` y se destruye
    con `delete`.
    """

    id: str = Field(..., min_length=1, description="Identificador asignado por el backend.")
    title: str = Field(default="", description="Título de la tarea.")
    content: str = Field(default="", description="Descripción libre.")
    is_completed: bool = Field(
        default=False,
        validation_alias=AliasChoices("isCompleted", "completed", "is_completed"),
        serialization_alias="isCompleted",
        description="Indica si la tarea ya está completada.",
    )
    task_priority: int = Field(default=1, alias="taskPriority")


class UserProfile(WireModel):
    """Perfil agregado: datos del endpoint de perfil + número de tareas abiertas."""

    email: str
    name: str
    number_of_notes: int = Field(
        default=0,
        ge=0,
        alias="numberOfNotes",
        description="Calculado en cliente a partir de la lista de tareas.",
    )


class LoginResponse(WireModel):
    token: str | None = None
    message: str | None = None


class RegisterResponse(WireModel):
    message: str | None = None


class GetTasksResponse(WireModel):
    notes: list[Task] | None = None


class UserProfileResponse(WireModel):
    email: str | None = None
    name: str | None = None


class MessageResponse(WireModel):
    """Respuesta de `complete` y `delete`."""

    message: str | None = None
