"""Resultado de dos variantes (éxito/fallo).

Por qué un tipo suma:
- Cada operación de la fachada devuelve exactamente un `Result`; el llamador
  nunca recibe `None` ni una excepción sin manejar.
- Se consume con `match` + `assert_never`, así el type checker obliga a cubrir
  ambas variantes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    error: BaseException

    def __str__(self) -> str:
        return str(self.error) or type(self.error).__name__


Result = Union[Success[T], Failure]
