"""
Top‑level router for version 1 of the API.

``build_router`` aggregates the domain routers.  Donation routes are
mounted under ``<prefix>/donations``; the health check and service
descriptor always live at the root so probes do not depend on the
configured prefix.
"""

from fastapi import APIRouter

from .endpoints import donations, system


def build_router(api_prefix: str = "") -> APIRouter:
    router = APIRouter()
    router.include_router(system.router, tags=["system"])
    router.include_router(donations.router, prefix=f"{api_prefix}/donations", tags=["donations"])
    return router
