"""
Projection résultat / erreur, indépendante du transport.

Toute opération du catalogue renvoie un Outcome :
SUCCESS | NOT_FOUND | NOT_IMPLEMENTED | UPSTREAM_FAILURE.
La couche HTTP choisit le status à partir de `kind`, jamais en
inspectant une exception.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class OutcomeKind(str, enum.Enum):
    success = "SUCCESS"
    not_found = "NOT_FOUND"
    not_implemented = "NOT_IMPLEMENTED"
    upstream_failure = "UPSTREAM_FAILURE"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    kind: OutcomeKind
    data: T | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.success

    @classmethod
    def success(cls, data: T) -> "Outcome[T]":
        return cls(OutcomeKind.success, data=data)

    @classmethod
    def not_found(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.not_found, message=message)

    @classmethod
    def not_implemented(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.not_implemented, message=message)

    @classmethod
    def upstream_failure(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.upstream_failure, message=message)
