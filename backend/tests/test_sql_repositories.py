# backend/tests/test_sql_repositories.py
from __future__ import annotations

import asyncio

from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from houses_api.db import Base
from houses_api.repositories.sql import SqlBidRepository, SqlHouseRepository
from houses_api.schemas import BidDto, HouseDetail


def _with_repos(tmp_path, scenario):
    """Runs `scenario(houses, bids)` against a fresh SQLite file."""

    async def _go():
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/repo.db")

        @event.listens_for(engine.sync_engine, "connect")
        def _fk(dbapi_connection, _record):
            cur = dbapi_connection.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            maker = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
            async with maker() as db:
                return await scenario(SqlHouseRepository(db), SqlBidRepository(db))
        finally:
            await engine.dispose()

    return asyncio.run(_go())


def test_add_assigns_ids_and_get_reads_back(tmp_path):
    async def scenario(houses, _bids):
        a = await houses.add(HouseDetail(address="12 Valley of Kings", country="Switzerland", price=900_000))
        b = await houses.add(HouseDetail(address="89 Road of Forks", price=500_000))
        got = await houses.get(b.id)
        summaries = await houses.get_all()
        return a, b, got, summaries

    a, b, got, summaries = _with_repos(tmp_path, scenario)

    assert a.id is not None and b.id is not None and a.id != b.id
    assert got == b
    assert [s.id for s in summaries] == [a.id, b.id]
    assert summaries[0].country == "Switzerland"


def test_reads_are_detached_snapshots(tmp_path):
    async def scenario(houses, _bids):
        h = await houses.add(HouseDetail(address="Meel Street 88", price=400_000))
        snap = await houses.get(h.id)
        snap.price = 1  # no write scheduled by this
        return await houses.get(h.id)

    again = _with_repos(tmp_path, scenario)
    assert again.price == 400_000


def test_get_missing_returns_none(tmp_path):
    async def scenario(houses, _bids):
        return await houses.get(12345)

    assert _with_repos(tmp_path, scenario) is None


def test_update_replaces_all_fields_but_id(tmp_path):
    async def scenario(houses, _bids):
        h = await houses.add(HouseDetail(address="Oude Gracht 3", description="old", price=650_000))
        await houses.update(HouseDetail(id=h.id, address="Oude Gracht 5", price=700_000))
        return h.id, await houses.get(h.id)

    hid, got = _with_repos(tmp_path, scenario)
    assert got.id == hid
    assert got.address == "Oude Gracht 5"
    assert got.price == 700_000
    assert got.description is None


def test_bids_are_listed_per_house_and_removed_with_it(tmp_path):
    async def scenario(houses, bids):
        h1 = await houses.add(HouseDetail(address="A", price=1))
        h2 = await houses.add(HouseDetail(address="B", price=2))
        b1 = await bids.add(BidDto(house_id=h1.id, bidder="Sonia", amount=100))
        await bids.add(BidDto(house_id=h2.id, bidder="Kim", amount=200))
        before = await bids.get(h1.id)
        await houses.delete(h1.id)
        after = await bids.get(h1.id)
        other = await bids.get(h2.id)
        return b1, before, after, other

    b1, before, after, other = _with_repos(tmp_path, scenario)

    assert before == [b1]
    assert b1.house_id is not None
    assert after == []
    assert [b.bidder for b in other] == ["Kim"]
