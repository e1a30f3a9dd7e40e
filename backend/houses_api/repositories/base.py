# backend/houses_api/repositories/base.py
from __future__ import annotations

from typing import Optional, Protocol

from ..schemas import BidDto, HouseDetail, HouseSummary


class HouseRepository(Protocol):
    """
    Storage capability for houses.

    Reads return detached snapshots; changing a returned object never reaches
    storage without an explicit add/update call.
    """

    async def get_all(self) -> list[HouseSummary]: ...

    async def get(self, house_id: int) -> Optional[HouseDetail]: ...

    async def add(self, detail: HouseDetail) -> HouseDetail: ...

    async def update(self, detail: HouseDetail) -> HouseDetail: ...

    async def delete(self, house_id: int) -> None: ...


class BidRepository(Protocol):
    """Bids are append-only: there is no update or delete."""

    async def get(self, house_id: int) -> list[BidDto]: ...

    async def add(self, bid: BidDto) -> BidDto: ...
