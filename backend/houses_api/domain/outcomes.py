# backend/houses_api/domain/outcomes.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class Created:
    value: Any
    location: str


@dataclass(frozen=True)
class ValidationFailure:
    violations: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class NotFound:
    kind: str
    id: Any

    @property
    def message(self) -> str:
        return f"{self.kind} with id {self.id} not found."


@dataclass(frozen=True)
class ReferenceMismatch:
    path_id: Any
    payload_id: Optional[Any]

    @property
    def message(self) -> str:
        return f"House id {self.payload_id} in body does not match house id {self.path_id} in URL."


Outcome = Union[Ok, Created, ValidationFailure, NotFound, ReferenceMismatch]
