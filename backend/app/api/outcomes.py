from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException

from backend.services.outcomes import Outcome, OutcomeKind

T = TypeVar("T")

STATUS_BY_KIND = {
    OutcomeKind.not_found: 404,
    OutcomeKind.not_implemented: 501,
    OutcomeKind.upstream_failure: 500,
}


def unwrap(outcome: Outcome[T]) -> T:
    """Renvoie le payload si SUCCESS, sinon HTTPException selon le type d'issue."""
    if outcome.ok:
        return outcome.data
    raise HTTPException(status_code=STATUS_BY_KIND[outcome.kind], detail=outcome.message)
