"""
Pydantic models for donation records.

Donations are exchanged as JSON with camelCase keys (``donorName``,
``createdAt``) while Python code works with snake_case attributes.
Every model accepts either spelling on input.  ``DonationCreate`` is
the draft a client submits, ``DonationUpdate`` carries a partial
update where only explicitly supplied keys are applied, and
``DonationRead`` is the full record returned by the API.
"""

import math
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DonationType(str, Enum):
    MONEY = "money"
    FOOD = "food"
    CLOTHING = "clothing"
    HOUSEHOLD_ITEMS = "household_items"
    TOYS = "toys"
    BOOKS = "books"
    OTHER = "other"


def parse_instant(value: str) -> datetime:
    """Parse an ISO‑8601 timestamp, accepting a trailing ``Z`` for UTC.

    Raises ``ValueError`` if the text is not a valid instant.
    """
    text = value.strip()
    if text[-1:] in {"Z", "z"}:
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


# Whole numbers stay integers on the wire (``100`` rather than ``100.0``).
Quantity = Union[int, float]


def check_quantity(value: Quantity) -> Quantity:
    """Reject negative and non‑finite quantities (``Infinity``, ``NaN``)."""
    if not math.isfinite(value):
        raise ValueError("Quantity must be a finite number")
    if value < 0:
        raise ValueError("Quantity must be greater than or equal to 0")
    return value


def _check_date(value: str) -> str:
    try:
        parse_instant(value)
    except ValueError as exc:
        raise ValueError("Invalid date format") from exc
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class DonationCreate(CamelModel):
    """Schema for recording a new donation."""

    donor_name: str = Field(..., min_length=1, examples=["John Smith"])
    type: DonationType = Field(..., examples=["money"])
    quantity: Quantity = Field(..., examples=[100])
    unit: str = Field(..., min_length=1, examples=["dollars"])
    date: str = Field(..., examples=["2024-01-15T08:00:00.000Z"])
    notes: Optional[str] = Field(None, examples=["Monthly donation"])

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: Quantity) -> Quantity:
        return check_quantity(v)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return _check_date(v)


class DonationUpdate(CamelModel):
    """Schema for updating a donation.

    All fields are optional; only keys present in the payload are
    applied.  ``notes`` may be set to ``null`` to clear it, every other
    field must carry a value when present.
    """

    donor_name: Optional[str] = Field(None, min_length=1)
    type: Optional[DonationType] = None
    quantity: Optional[Quantity] = None
    unit: Optional[str] = Field(None, min_length=1)
    date: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("donor_name", "type", "quantity", "unit", "date")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: Quantity) -> Quantity:
        return check_quantity(v)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return _check_date(v)


class DonationRead(CamelModel):
    """Schema for a stored donation record."""

    id: str
    donor_name: str
    type: DonationType
    quantity: Quantity
    unit: str
    date: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DonationStats(CamelModel):
    """Aggregate figures computed from the current set of donations."""

    total_donations: int
    total_money_donated: Quantity
    donations_by_type: Dict[str, int]
    recent_donations: List[DonationRead]
