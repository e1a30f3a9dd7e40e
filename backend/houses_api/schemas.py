# backend/houses_api/schemas.py
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Dto(BaseModel):
    """
    Wire shapes. Fields are camelCase on the wire and snake_case in Python.

    Every field is optional at the parsing layer: which fields are required is
    decided by the rule tables in houses_api.domain.rules, so a missing field
    shows up as a rule violation instead of a parser error.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# -------------------- Houses --------------------

class HouseSummary(Dto):
    id: Optional[int] = None
    address: Optional[str] = None
    country: Optional[str] = None
    price: Optional[int] = None


class HouseDetail(Dto):
    id: Optional[int] = None
    address: Optional[str] = None
    country: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = None
    photo: Optional[str] = None


# -------------------- Bids --------------------

class BidDto(Dto):
    id: Optional[int] = None
    house_id: Optional[int] = None
    bidder: Optional[str] = None
    amount: Optional[int] = None


# -------------------- Errors --------------------

class ProblemOut(BaseModel):
    detail: str


class ValidationProblemOut(BaseModel):
    detail: str
    errors: dict[str, list[str]]
