# backend/houses_api/services/house_handlers.py
"""
House request handlers.

Each handler walks the same path: validate the payload, run the consistency
checks, perform exactly one repository call, and return an outcome. Rejections
are returned as outcome values; only storage errors propagate as exceptions.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..domain.consistency import entity_exists
from ..domain.outcomes import Created, NotFound, Ok, Outcome, ValidationFailure
from ..domain.rules import HOUSE_RULES
from ..domain.validation import validate
from ..repositories.base import HouseRepository
from ..schemas import HouseDetail

log = logging.getLogger("houses_api.houses")

HOUSE = "House"


def house_location(house_id: int) -> str:
    return f"/houses/{house_id}"


async def list_houses(houses: HouseRepository) -> Outcome:
    return Ok(await houses.get_all())


async def get_house(houses: HouseRepository, house_id: int) -> Outcome:
    found = await entity_exists(houses.get, HOUSE, house_id)
    if isinstance(found, NotFound):
        log.info("house not found", extra={"house_id": house_id})
        return found
    return Ok(found.entity)


async def create_house(houses: HouseRepository, dto: Optional[HouseDetail]) -> Outcome:
    result = validate(dto, HOUSE_RULES, HouseDetail)
    if not result.valid:
        log.info("house rejected", extra={"fields": list(result.violations)})
        return ValidationFailure(result.violations)

    # storage assigns the id; anything the client sent is ignored
    created = await houses.add(dto.model_copy(update={"id": None}))
    log.info("house created", extra={"house_id": created.id})
    return Created(created, location=house_location(created.id))


async def update_house(houses: HouseRepository, dto: Optional[HouseDetail]) -> Outcome:
    """
    The body id picks the house to update; this operation has no path id.
    """
    result = validate(dto, HOUSE_RULES, HouseDetail)
    if not result.valid:
        log.info("house update rejected", extra={"fields": list(result.violations)})
        return ValidationFailure(result.violations)

    found = await entity_exists(houses.get, HOUSE, dto.id) if dto.id is not None else NotFound(HOUSE, None)
    if isinstance(found, NotFound):
        log.info("house not found", extra={"house_id": dto.id})
        return found

    updated = await houses.update(dto)
    log.info("house updated", extra={"house_id": updated.id})
    return Ok(updated)


async def delete_house(houses: HouseRepository, house_id: int) -> Outcome:
    found = await entity_exists(houses.get, HOUSE, house_id)
    if isinstance(found, NotFound):
        log.info("house not found", extra={"house_id": house_id})
        return found

    await houses.delete(house_id)
    log.info("house deleted", extra={"house_id": house_id})
    return Ok(None)
