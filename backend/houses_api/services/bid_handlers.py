# backend/houses_api/services/bid_handlers.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from pydantic import TypeAdapter, ValidationError

from ..domain.consistency import entity_exists, reference_matches
from ..domain.outcomes import Created, NotFound, Ok, Outcome, ValidationFailure
from ..domain.rules import BID_RULES
from ..domain.validation import validate_payload
from ..repositories.base import BidRepository, HouseRepository
from ..schemas import BidDto
from .house_handlers import HOUSE

log = logging.getLogger("houses_api.bids")


def bids_location(house_id: int) -> str:
    return f"/houses/{house_id}/bids"


async def list_bids(houses: HouseRepository, bids: BidRepository, house_id: int) -> Outcome:
    found = await entity_exists(houses.get, HOUSE, house_id)
    if isinstance(found, NotFound):
        log.info("house not found", extra={"house_id": house_id})
        return found
    return Ok(await bids.get(house_id))


BidPayload = Union[Mapping[str, Any], BidDto, None]

_HOUSE_ID = TypeAdapter(int)


def _payload_house_id(payload: BidPayload) -> Any:
    """
    The body's house id as the parser would read it, or the raw value when it
    is not an integer at all (which can never match a URL id).
    """
    if payload is None:
        return None
    if isinstance(payload, BidDto):
        return payload.house_id
    raw = payload.get("houseId", payload.get("house_id"))
    if raw is None:
        return None
    try:
        return _HOUSE_ID.validate_python(raw)
    except ValidationError:
        return raw


async def create_bid(
    houses: HouseRepository,
    bids: BidRepository,
    house_id: int,
    payload: BidPayload,
) -> Outcome:
    """
    Order is fixed:
      1) body houseId must equal the URL house id (checked on the raw body,
         before any other field is parsed)
      2) field types and rules
      3) the house must exist
      4) add
    """
    payload_house_id = _payload_house_id(payload)
    mismatch = reference_matches(house_id, payload_house_id)
    if mismatch is not None:
        log.info(
            "bid house mismatch",
            extra={"path_house_id": house_id, "payload_house_id": payload_house_id},
        )
        return mismatch

    dto, result = validate_payload(BidDto, payload, BID_RULES)
    if not result.valid:
        log.info("bid rejected", extra={"house_id": house_id, "fields": list(result.violations)})
        return ValidationFailure(result.violations)

    found = await entity_exists(houses.get, HOUSE, house_id)
    if isinstance(found, NotFound):
        log.info("house not found", extra={"house_id": house_id})
        return found

    created = await bids.add(dto.model_copy(update={"id": None}))
    log.info("bid created", extra={"house_id": house_id, "bid_id": created.id})
    return Created(created, location=bids_location(house_id))
