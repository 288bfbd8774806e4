"""
Resultados etiquetados de las operaciones de upsert.

Un upsert que no escribe nada no es un error: retorna Unchanged y el
caller decide qué hacer mirando el tipo.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Updated(Generic[T]):
    record: T


@dataclass(frozen=True)
class Unchanged:
    reason: str


UpsertResult = Union[Updated[T], Unchanged]


def as_payload(result: UpsertResult) -> dict:
    """`{"updated": record}` or `{"message": reason}` for the HTTP layer."""
    if isinstance(result, Updated):
        return {"updated": result.record.model_dump()}
    return {"message": result.reason}
