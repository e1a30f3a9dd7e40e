# backend/houses_api/http_mapping.py
"""
Outcome -> HTTP translation.

Handlers never touch HTTP; routers pass their outcome through `to_response`.
"""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse, Response

from .domain.outcomes import Created, NotFound, Ok, Outcome, ReferenceMismatch, ValidationFailure
from .schemas import Dto

VALIDATION_DETAIL = "One or more validation errors occurred."


def _wire(value: Any) -> Any:
    if isinstance(value, Dto):
        return value.to_wire()
    if isinstance(value, (list, tuple)):
        return [_wire(v) for v in value]
    return value


def validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": VALIDATION_DETAIL, "errors": errors},
    )


def to_response(outcome: Outcome) -> Response:
    if isinstance(outcome, Ok):
        if outcome.value is None:
            return Response(status_code=status.HTTP_200_OK)
        return JSONResponse(status_code=status.HTTP_200_OK, content=_wire(outcome.value))

    if isinstance(outcome, Created):
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=_wire(outcome.value),
            headers={"Location": outcome.location},
        )

    if isinstance(outcome, ValidationFailure):
        return validation_problem(outcome.violations)

    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=outcome.message)

    if isinstance(outcome, ReferenceMismatch):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)

    raise TypeError(f"unknown outcome: {type(outcome).__name__}")
