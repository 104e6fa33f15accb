"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store so the API representation
(camelCase JSON) is decoupled from how records are held in memory.
"""

from .common import ApiInfo, ErrorResponse, HealthRead
from .donation import (
    DonationCreate,
    DonationRead,
    DonationStats,
    DonationType,
    DonationUpdate,
)

__all__ = [
    "ApiInfo",
    "ErrorResponse",
    "HealthRead",
    "DonationCreate",
    "DonationRead",
    "DonationStats",
    "DonationType",
    "DonationUpdate",
]
