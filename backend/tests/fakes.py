# backend/tests/fakes.py
from __future__ import annotations

from typing import Optional

from houses_api.schemas import BidDto, HouseDetail, HouseSummary


class InMemoryHouseRepository:
    """HouseRepository double. Hands out copies, like the SQL one hands out snapshots."""

    def __init__(self) -> None:
        self.rows: dict[int, HouseDetail] = {}
        self.calls: list[str] = []
        self._next_id = 1

    async def get_all(self) -> list[HouseSummary]:
        self.calls.append("get_all")
        return [HouseSummary(**r.model_dump(include={"id", "address", "country", "price"})) for r in self.rows.values()]

    async def get(self, house_id: int) -> Optional[HouseDetail]:
        self.calls.append("get")
        row = self.rows.get(house_id)
        return row.model_copy() if row is not None else None

    async def add(self, detail: HouseDetail) -> HouseDetail:
        self.calls.append("add")
        row = detail.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self.rows[row.id] = row
        return row.model_copy()

    async def update(self, detail: HouseDetail) -> HouseDetail:
        self.calls.append("update")
        self.rows[detail.id] = detail.model_copy()
        return detail.model_copy()

    async def delete(self, house_id: int) -> None:
        self.calls.append("delete")
        self.rows.pop(house_id, None)


class InMemoryBidRepository:
    def __init__(self) -> None:
        self.rows: list[BidDto] = []
        self.calls: list[str] = []

    async def get(self, house_id: int) -> list[BidDto]:
        self.calls.append("get")
        return [b.model_copy() for b in self.rows if b.house_id == house_id]

    async def add(self, bid: BidDto) -> BidDto:
        self.calls.append("add")
        row = bid.model_copy(update={"id": len(self.rows) + 1})
        self.rows.append(row)
        return row.model_copy()
