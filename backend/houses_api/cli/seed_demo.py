# backend/houses_api/cli/seed_demo.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import delete

from ..db import SessionLocal, init_db
from ..models import Bid, House
from ..repositories.sql import SqlBidRepository, SqlHouseRepository
from ..schemas import BidDto, HouseDetail

DEMO_HOUSES: list[dict] = [
    {
        "address": "12 Valley of Kings, Geneva",
        "country": "Switzerland",
        "description": "A superb detached Victorian property on one of the town's finest roads, "
        "within easy reach of the lake.",
        "price": 900_000,
    },
    {
        "address": "89 Road of Forks, Bern",
        "country": "Switzerland",
        "description": "This property, built in 1990, offers a spacious plot and room to grow.",
        "price": 500_000,
    },
    {
        "address": "Grote Hof 12, Amsterdam",
        "country": "The Netherlands",
        "description": "Canal house with a roof terrace in the historic centre.",
        "price": 200_000,
    },
    {
        "address": "Meel Street 88, Antwerp",
        "country": "Belgium",
        "description": "Family home close to the park, schools and public transport.",
        "price": 400_000,
    },
    {
        "address": "Oude Gracht 3, Utrecht",
        "country": "The Netherlands",
        "description": "Waterside apartment with a private wharf cellar.",
        "price": 650_000,
    },
]

DEMO_BID = {"bidder": "Sonia Reading", "amount": 200_000}


@dataclass(frozen=True)
class SeedResult:
    house_ids: list[int]
    bid_id: Optional[int]


async def seed_demo(*, count: int = len(DEMO_HOUSES), reset: bool = False, with_bid: bool = True) -> SeedResult:
    """
    Inserts demo houses (and one bid on the first) through the repositories,
    so the rows go through the same code path as API writes.
    """
    await init_db()

    async with SessionLocal() as db:
        if reset:
            await db.execute(delete(Bid))
            await db.execute(delete(House))
            await db.commit()

        houses = SqlHouseRepository(db)
        bids = SqlBidRepository(db)

        ids: list[int] = []
        for row in DEMO_HOUSES[: max(0, count)]:
            created = await houses.add(HouseDetail(**row))
            ids.append(int(created.id))

        bid_id: Optional[int] = None
        if with_bid and ids:
            bid = await bids.add(BidDto(house_id=ids[0], **DEMO_BID))
            bid_id = bid.id

    return SeedResult(house_ids=ids, bid_id=bid_id)
