"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from donation_tracker.app.services.donation_service import DonationStore


def get_donation_store(request: Request) -> DonationStore:
    """Return the store attached to the running application."""
    return request.app.state.donation_store
