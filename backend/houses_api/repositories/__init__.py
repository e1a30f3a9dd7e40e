from .base import BidRepository, HouseRepository
from .sql import SqlBidRepository, SqlHouseRepository

__all__ = ["BidRepository", "HouseRepository", "SqlBidRepository", "SqlHouseRepository"]
