# backend/houses_api/deps.py
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .db import get_db
from .repositories.sql import SqlBidRepository, SqlHouseRepository


def house_repository(db: AsyncSession = Depends(get_db)) -> SqlHouseRepository:
    return SqlHouseRepository(db)


def bid_repository(db: AsyncSession = Depends(get_db)) -> SqlBidRepository:
    return SqlBidRepository(db)
