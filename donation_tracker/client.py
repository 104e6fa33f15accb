"""Donation tracker API client.

This module provides a thin wrapper around the donation REST API and
the helpers a front end needs around it:

* :class:`DonationApiClient` – one method per endpoint, using the
  ``requests`` library.
* :class:`DonationBoard` – a local view model that keeps a list of
  donations in sync with the server after each create, update or
  delete, without refetching the whole list.
* :func:`validate_donation_form` / :func:`build_draft` – the checks
  and normalisation a data‑entry form applies before submitting.
* :func:`format_donation_type` / :func:`format_date` – display helpers.

Every client method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` (or an empty
value) and ``error`` is a dictionary with the keys ``status_code``
and ``message``, where ``message`` comes from the server's ``error``
field when one was sent.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from donation_tracker.app.schemas.donation import DonationType, parse_instant


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class DonationApiClient:
    """Client for the donation API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3001",
        api_prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3001``.
            api_prefix: Prefix the server mounts donation routes under
                (``API_PREFIX`` on the server side), e.g. ``/api``.
            session: Optional requests session.  Anything with a
                compatible ``request`` method works, which lets tests
                pass a FastAPI ``TestClient``.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.donations_path = f"{api_prefix.rstrip('/')}/donations"
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("error") or body.get("message") or ""
            except ValueError:
                message = response.text
            if not message:
                message = f"Request failed with status {response.status_code}"
            logger.error("API request %s %s failed (%s): %s", method, path, response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Donation operations
    # ------------------------------------------------------------------
    def list_donations(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self.donations_path)
        return (data or []), error

    def get_donation(self, donation_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.donations_path}/{donation_id}")

    def create_donation(self, draft: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self.donations_path, json_body=draft)

    def update_donation(
        self, donation_id: str, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send a partial update; only the keys in ``changes`` are modified."""
        return self._request("PUT", f"{self.donations_path}/{donation_id}", json_body=changes)

    def delete_donation(self, donation_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"{self.donations_path}/{donation_id}")
        return error is None, error

    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.donations_path}/stats")

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")


class DonationBoard:
    """Local list of donations kept in step with the server.

    After a successful call the local list is patched in place: a new
    donation goes to the top, an updated one replaces its old entry and
    a deleted one is dropped.  When a call fails the list is left
    untouched and ``error`` holds the server's message.
    """

    def __init__(self, client: DonationApiClient) -> None:
        self.client = client
        self.donations: List[Dict[str, Any]] = []
        self.error: str = ""

    def refresh(self) -> bool:
        donations, error = self.client.list_donations()
        if error:
            self.error = error["message"]
            return False
        self.donations = donations
        self.error = ""
        return True

    def create(self, draft: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        donation, error = self.client.create_donation(draft)
        if error:
            self.error = error["message"]
            return None
        self.donations = [donation] + self.donations
        return donation

    def update(self, donation_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        donation, error = self.client.update_donation(donation_id, changes)
        if error:
            self.error = error["message"]
            return None
        self.donations = [donation if d["id"] == donation_id else d for d in self.donations]
        return donation

    def delete(self, donation_id: str) -> bool:
        deleted, error = self.client.delete_donation(donation_id)
        if error:
            self.error = error["message"]
            return False
        self.donations = [d for d in self.donations if d["id"] != donation_id]
        return deleted


# ----------------------------------------------------------------------
# Form helpers
# ----------------------------------------------------------------------
def _text(form: Dict[str, Any], key: str) -> str:
    value = form.get(key)
    return value.strip() if isinstance(value, str) else ""


def _quantity(form: Dict[str, Any]) -> Optional[float]:
    try:
        return float(form.get("quantity"))
    except (TypeError, ValueError):
        return None


def validate_donation_form(form: Dict[str, Any]) -> Dict[str, str]:
    """Check a raw form before submission.

    Returns a mapping of field name to error message; an empty mapping
    means the form can be submitted.  The form rejects a zero quantity
    even though the server accepts it.
    """
    errors: Dict[str, str] = {}
    if not _text(form, "donorName"):
        errors["donorName"] = "Donor name is required"
    if form.get("type") not in {t.value for t in DonationType}:
        errors["type"] = "Donation type is required"
    quantity = _quantity(form)
    if quantity is None or quantity <= 0:
        errors["quantity"] = "Quantity must be greater than 0"
    if not _text(form, "unit"):
        errors["unit"] = "Unit is required"
    try:
        parse_instant(_text(form, "date"))
    except ValueError:
        errors["date"] = "Valid date is required"
    return errors


def build_draft(form: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a validated form into a create payload."""
    draft: Dict[str, Any] = {
        "donorName": _text(form, "donorName"),
        "type": form["type"],
        "quantity": _quantity(form),
        "unit": _text(form, "unit"),
        "date": _text(form, "date"),
    }
    notes = _text(form, "notes")
    if notes:
        draft["notes"] = notes
    return draft


def format_donation_type(donation_type: str) -> str:
    """``household_items`` -> ``Household Items``."""
    return donation_type.replace("_", " ").title()


def format_date(value: str) -> str:
    """``2024-01-15T08:00:00.000Z`` -> ``Jan 15, 2024``."""
    return parse_instant(value).strftime("%b %d, %Y")
