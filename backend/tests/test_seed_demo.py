# backend/tests/test_seed_demo.py
from __future__ import annotations

import asyncio

from houses_api.cli.seed_demo import DEMO_HOUSES, seed_demo
from houses_api.db import SessionLocal, dispose_engine
from houses_api.repositories.sql import SqlBidRepository, SqlHouseRepository


def test_seed_demo_inserts_houses_and_one_bid():
    async def _go():
        try:
            out = await seed_demo(count=2)
            async with SessionLocal() as db:
                first = await SqlHouseRepository(db).get(out.house_ids[0])
                bids = await SqlBidRepository(db).get(out.house_ids[0])
            return out, first, bids
        finally:
            await dispose_engine()

    out, first, bids = asyncio.run(_go())

    assert len(out.house_ids) == 2
    assert first.address == DEMO_HOUSES[0]["address"]
    assert [b.id for b in bids] == [out.bid_id]
