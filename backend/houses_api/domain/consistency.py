# backend/houses_api/domain/consistency.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from .outcomes import NotFound, ReferenceMismatch
from .validation import INT64_MAX, INT64_MIN

Lookup = Callable[[int], Awaitable[Optional[Any]]]


@dataclass(frozen=True)
class Found:
    entity: Any


async def entity_exists(lookup: Lookup, kind: str, entity_id: int) -> Union[Found, NotFound]:
    """
    Existence check through a repository read. Pure read, no side effects.

    Callers must await this before issuing the write it guards. Nothing holds
    the row between the check and the write, so a concurrent delete can still
    land in between; that race is accepted.
    """
    if not INT64_MIN <= entity_id <= INT64_MAX:
        # cannot be a stored id
        return NotFound(kind=kind, id=entity_id)
    entity = await lookup(entity_id)
    if entity is None:
        return NotFound(kind=kind, id=entity_id)
    return Found(entity)


def reference_matches(path_id: int, payload_id: Any) -> Optional[ReferenceMismatch]:
    if payload_id != path_id:
        return ReferenceMismatch(path_id=path_id, payload_id=payload_id)
    return None
