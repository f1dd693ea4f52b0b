"""Estado de sesión explícito.

Por qué un objeto y no una variable global:
- La fachada lo recibe al construirse y el hook de autorización del cliente
  HTTP lo lee; no hay estado ambiental compartido entre instancias.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Session:
    """Token opaco emitido por `/api/login`."""

    token: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token.strip())

    def clear(self) -> None:
        self.token = ""
