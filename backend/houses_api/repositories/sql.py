# backend/houses_api/repositories/sql.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Bid, House
from ..schemas import BidDto, HouseDetail, HouseSummary

_HOUSE_FIELDS = ("address", "country", "description", "price", "photo")


def _bid_snapshot(row: Bid) -> BidDto:
    return BidDto(id=row.id, house_id=row.house_id, bidder=row.bidder, amount=row.amount)


class SqlHouseRepository:
    """
    HouseRepository over an AsyncSession.

    Every read is converted to a pydantic snapshot and the ORM row is expunged,
    so nothing returned from here is tracked by the session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get_all(self) -> list[HouseSummary]:
        rows = (await self._db.execute(select(House).order_by(House.id))).scalars().all()
        out = [HouseSummary.model_validate(r) for r in rows]
        self._db.expunge_all()
        return out

    async def get(self, house_id: int) -> Optional[HouseDetail]:
        row = await self._db.scalar(select(House).where(House.id == int(house_id)))
        if row is None:
            return None
        out = HouseDetail.model_validate(row)
        self._db.expunge(row)
        return out

    async def add(self, detail: HouseDetail) -> HouseDetail:
        row = House(**detail.model_dump(include=set(_HOUSE_FIELDS)))
        self._db.add(row)
        await self._db.commit()
        await self._db.refresh(row)
        out = HouseDetail.model_validate(row)
        self._db.expunge(row)
        return out

    async def update(self, detail: HouseDetail) -> HouseDetail:
        # id must already exist; handlers check that before calling
        values = detail.model_dump(include=set(_HOUSE_FIELDS))
        await self._db.execute(update(House).where(House.id == int(detail.id)).values(**values))
        await self._db.commit()
        return HouseDetail(id=detail.id, **values)

    async def delete(self, house_id: int) -> None:
        await self._db.execute(delete(House).where(House.id == int(house_id)))
        await self._db.commit()


class SqlBidRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get(self, house_id: int) -> list[BidDto]:
        rows = (
            await self._db.execute(select(Bid).where(Bid.house_id == int(house_id)).order_by(Bid.id))
        ).scalars().all()
        out = [_bid_snapshot(r) for r in rows]
        self._db.expunge_all()
        return out

    async def add(self, bid: BidDto) -> BidDto:
        row = Bid(house_id=bid.house_id, bidder=bid.bidder, amount=bid.amount)
        self._db.add(row)
        await self._db.commit()
        await self._db.refresh(row)
        out = _bid_snapshot(row)
        self._db.expunge(row)
        return out
