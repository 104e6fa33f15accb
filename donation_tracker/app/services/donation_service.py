"""
Service layer for donation records.

``DonationStore`` is the authoritative, process‑lifetime collection
of donations keyed by id.  Records live only in memory and are lost
when the process exits.  Each operation runs under a single lock so
the store can be shared by the worker threads FastAPI uses for
synchronous endpoints.

Callers never receive live references: every record handed out is a
copy, so mutating a returned object has no effect on the store.
Expected conditions (unknown id, nothing to delete) are signalled by
``None`` / ``False`` return values; the API layer decides the status
code.  ``DonationValidationError`` is raised only when a draft or
update that bypassed schema validation would break a record
invariant.
"""

from __future__ import annotations

import logging
import math
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from donation_tracker.app.schemas.donation import (
    DonationCreate,
    DonationRead,
    DonationStats,
    DonationType,
    DonationUpdate,
)


logger = logging.getLogger(__name__)

RECENT_DONATIONS_LIMIT = 5

SAMPLE_DONATIONS: List[DonationCreate] = [
    DonationCreate(
        donor_name="John Smith",
        type=DonationType.MONEY,
        quantity=100,
        unit="dollars",
        date="2024-01-15T08:00:00.000Z",
        notes="Monthly donation",
    ),
    DonationCreate(
        donor_name="Seattle Food Bank",
        type=DonationType.FOOD,
        quantity=50,
        unit="pounds",
        date="2024-01-14T10:30:00.000Z",
        notes="Canned goods and dry foods",
    ),
    DonationCreate(
        donor_name="Community Church",
        type=DonationType.CLOTHING,
        quantity=25,
        unit="bags",
        date="2024-01-12T14:15:00.000Z",
        notes="Winter coats and blankets",
    ),
]


class DonationValidationError(ValueError):
    """Raised when a donation would violate a record invariant."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_fields(fields: Mapping[str, Any]) -> None:
    if "quantity" in fields:
        quantity = fields["quantity"]
        if not isinstance(quantity, (int, float)) or not math.isfinite(quantity) or quantity < 0:
            raise DonationValidationError("Quantity must be a finite, non-negative number")
    for name, label in (("donor_name", "Donor name"), ("unit", "Unit")):
        if name in fields:
            value = fields[name]
            if not isinstance(value, str) or not value.strip():
                raise DonationValidationError(f"{label} must not be empty")


class DonationStore:
    """In‑memory collection of donation records."""

    def __init__(
        self,
        seed: Optional[Iterable[Union[DonationCreate, Mapping[str, Any]]]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._records: Dict[str, DonationRead] = {}
        # Creation order, used to break ties between equal timestamps.
        self._sequence: Dict[str, int] = {}
        self._counter = 0
        self._lock = threading.Lock()
        self._clock = clock or _utcnow
        for draft in seed or ():
            self.create(draft)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _next_id(self) -> str:
        self._counter += 1
        return f"donation_{self._counter}"

    def _sorted(self) -> List[DonationRead]:
        return sorted(
            self._records.values(),
            key=lambda record: (record.created_at, self._sequence[record.id]),
            reverse=True,
        )

    def list(self) -> List[DonationRead]:
        """Return all donations, most recently created first."""
        with self._lock:
            return [record.model_copy(deep=True) for record in self._sorted()]

    def get_by_id(self, donation_id: str) -> Optional[DonationRead]:
        with self._lock:
            record = self._records.get(donation_id)
            return record.model_copy(deep=True) if record is not None else None

    def create(self, draft: Union[DonationCreate, Mapping[str, Any]]) -> DonationRead:
        """Store a new donation and return it with its id and timestamps."""
        if not isinstance(draft, DonationCreate):
            draft = DonationCreate.model_validate(draft)
        fields = draft.model_dump()
        _check_fields(fields)
        with self._lock:
            now = self._clock()
            donation_id = self._next_id()
            record = DonationRead(id=donation_id, created_at=now, updated_at=now, **fields)
            self._records[donation_id] = record
            self._sequence[donation_id] = self._counter
        logger.info("Created donation %s from %s", donation_id, record.donor_name)
        return record.model_copy(deep=True)

    def update(
        self,
        donation_id: str,
        partial: Union[DonationUpdate, Mapping[str, Any]],
    ) -> Optional[DonationRead]:
        """Apply the fields present in ``partial`` to an existing donation.

        Fields absent from ``partial`` keep their current values.
        Returns the updated donation or ``None`` if the id is unknown,
        in which case nothing is changed.
        """
        if not isinstance(partial, DonationUpdate):
            partial = DonationUpdate.model_validate(partial)
        changes = partial.model_dump(exclude_unset=True)
        _check_fields(changes)
        with self._lock:
            current = self._records.get(donation_id)
            if current is None:
                return None
            updated_at = max(self._clock(), current.updated_at)
            record = current.model_copy(update={**changes, "updated_at": updated_at})
            self._records[donation_id] = record
        logger.info("Updated donation %s (%s)", donation_id, ", ".join(sorted(changes)) or "no fields")
        return record.model_copy(deep=True)

    def delete(self, donation_id: str) -> bool:
        """Remove a donation.  Returns ``True`` if a record was deleted."""
        with self._lock:
            record = self._records.pop(donation_id, None)
            self._sequence.pop(donation_id, None)
        if record is None:
            return False
        logger.info("Deleted donation %s", donation_id)
        return True

    def stats(self) -> DonationStats:
        """Compute aggregate figures from the current collection."""
        donations = self.list()
        by_type: Dict[str, int] = {}
        total_money: Union[int, float] = 0
        for donation in donations:
            key = DonationType(donation.type).value
            by_type[key] = by_type.get(key, 0) + 1
            if donation.type == DonationType.MONEY:
                total_money += donation.quantity
        return DonationStats(
            total_donations=len(donations),
            total_money_donated=total_money,
            donations_by_type=by_type,
            recent_donations=donations[:RECENT_DONATIONS_LIMIT],
        )
