# backend/houses_api/routers/bids.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from ..deps import bid_repository, house_repository
from ..http_mapping import to_response
from ..repositories.sql import SqlBidRepository, SqlHouseRepository
from ..schemas import BidDto, ProblemOut, ValidationProblemOut
from ..services import bid_handlers

router = APIRouter(prefix="/house/{house_id}/bids", tags=["bids"])


@router.get("", response_model=list[BidDto], responses={404: {"model": ProblemOut}})
async def list_bids(
    house_id: int,
    houses: SqlHouseRepository = Depends(house_repository),
    bids: SqlBidRepository = Depends(bid_repository),
):
    return to_response(await bid_handlers.list_bids(houses, bids, house_id))


# The body stays untyped here; create_bid compares its houseId with the URL
# before any other field is parsed.
@router.post(
    "",
    status_code=201,
    response_model=BidDto,
    responses={
        400: {"model": ProblemOut},
        404: {"model": ProblemOut},
        422: {"model": ValidationProblemOut},
    },
)
async def create_bid(
    house_id: int,
    payload: Optional[dict[str, Any]] = Body(None),
    houses: SqlHouseRepository = Depends(house_repository),
    bids: SqlBidRepository = Depends(bid_repository),
):
    return to_response(await bid_handlers.create_bid(houses, bids, house_id, payload))
