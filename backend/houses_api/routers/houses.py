# backend/houses_api/routers/houses.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..deps import house_repository
from ..http_mapping import to_response
from ..repositories.sql import SqlHouseRepository
from ..schemas import HouseDetail, HouseSummary, ProblemOut, ValidationProblemOut
from ..services import house_handlers

router = APIRouter(tags=["houses"])

_NOT_FOUND = {404: {"model": ProblemOut}}
_INVALID = {422: {"model": ValidationProblemOut}}


@router.get("/houses", response_model=list[HouseSummary])
async def list_houses(houses: SqlHouseRepository = Depends(house_repository)):
    return to_response(await house_handlers.list_houses(houses))


@router.get("/house/{house_id}", response_model=HouseDetail, responses=_NOT_FOUND)
async def get_house(house_id: int, houses: SqlHouseRepository = Depends(house_repository)):
    return to_response(await house_handlers.get_house(houses, house_id))


@router.post("/houses", status_code=201, response_model=HouseDetail, responses=_INVALID)
async def create_house(
    payload: Optional[HouseDetail] = Body(None),
    houses: SqlHouseRepository = Depends(house_repository),
):
    return to_response(await house_handlers.create_house(houses, payload))


@router.put("/houses", response_model=HouseDetail, responses={**_NOT_FOUND, **_INVALID})
async def update_house(
    payload: Optional[HouseDetail] = Body(None),
    houses: SqlHouseRepository = Depends(house_repository),
):
    return to_response(await house_handlers.update_house(houses, payload))


@router.delete("/houses/{house_id}", responses=_NOT_FOUND)
async def delete_house(house_id: int, houses: SqlHouseRepository = Depends(house_repository)):
    return to_response(await house_handlers.delete_house(houses, house_id))
