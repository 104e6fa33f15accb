"""
Donation endpoints for API v1.

These routes provide CRUD operations over the donation store plus an
aggregate statistics view.  Payload shape is validated by the
Pydantic schemas; a failing ``type`` or ``date`` field is reported as
``Invalid donation type`` / ``Invalid date format`` by the
application's validation handler.  The store signals a missing id by
returning ``None`` (or ``False`` for deletes) and the handlers here
turn that into a 404.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from donation_tracker.app.api.deps import get_donation_store
from donation_tracker.app.schemas.donation import (
    DonationCreate,
    DonationRead,
    DonationStats,
    DonationUpdate,
)
from donation_tracker.app.services.donation_service import DonationStore

NOT_FOUND = "Donation not found"

router = APIRouter()


@router.get("", response_model=List[DonationRead])
def list_donations(store: DonationStore = Depends(get_donation_store)) -> List[DonationRead]:
    """Return all donations, most recently created first."""
    return store.list()


# Declared before ``/{donation_id}`` so "stats" is not taken for an id.
@router.get("/stats", response_model=DonationStats)
def donation_stats(store: DonationStore = Depends(get_donation_store)) -> DonationStats:
    """Return totals, per‑type counts and the five newest donations."""
    return store.stats()


@router.get("/{donation_id}", response_model=DonationRead)
def get_donation(
    donation_id: str,
    store: DonationStore = Depends(get_donation_store),
) -> DonationRead:
    donation = store.get_by_id(donation_id)
    if donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return donation


@router.post("", response_model=DonationRead, status_code=status.HTTP_201_CREATED)
def create_donation(
    donation_in: DonationCreate,
    store: DonationStore = Depends(get_donation_store),
) -> DonationRead:
    """Record a new donation."""
    return store.create(donation_in)


@router.put("/{donation_id}", response_model=DonationRead)
def update_donation(
    donation_id: str,
    donation_in: DonationUpdate,
    store: DonationStore = Depends(get_donation_store),
) -> DonationRead:
    """Update an existing donation.

    Partial updates are supported; any field missing from the body
    keeps its current value.
    """
    donation = store.update(donation_id, donation_in)
    if donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return donation


@router.delete("/{donation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_donation(
    donation_id: str,
    store: DonationStore = Depends(get_donation_store),
) -> None:
    if not store.delete(donation_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
