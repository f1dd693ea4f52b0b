"""Errores del dominio.

Los fallos de transporte (`httpx.HTTPError`) no se envuelven: viajan tal cual
como causa del `Failure`.
"""

from __future__ import annotations


class TaskieError(Exception):
    """Base de los errores propios del cliente."""


class MissingBodyError(TaskieError):
    """Respuesta HTTP sin el campo requerido (token, mensaje, tarea, datos)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (HTTP {self.status_code})"
