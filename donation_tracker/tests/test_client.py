import pytest
import requests

from donation_tracker.client import (
    DonationApiClient,
    DonationBoard,
    build_draft,
    format_date,
    format_donation_type,
    validate_donation_form,
)
from donation_tracker.tests.conftest import make_draft


@pytest.fixture
def api(client):
    return DonationApiClient(base_url="http://testserver", session=client)


class UnreachableSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_client_round_trip(api):
    created, error = api.create_donation(make_draft())
    assert error is None
    assert created["donorName"] == "John Smith"

    fetched, error = api.get_donation(created["id"])
    assert error is None
    assert fetched == created

    updated, error = api.update_donation(created["id"], {"notes": "Quarterly"})
    assert error is None
    assert updated["notes"] == "Quarterly"
    assert updated["quantity"] == created["quantity"]

    donations, error = api.list_donations()
    assert error is None
    assert [d["id"] for d in donations] == [created["id"]]

    stats, error = api.get_stats()
    assert error is None
    assert stats["totalDonations"] == 1

    deleted, error = api.delete_donation(created["id"])
    assert deleted is True
    assert error is None


def test_client_reports_server_error_message(api):
    data, error = api.get_donation("missing")
    assert data is None
    assert error == {"status_code": 404, "message": "Donation not found"}

    data, error = api.create_donation(make_draft(type="invalid_type"))
    assert data is None
    assert error == {"status_code": 400, "message": "Invalid donation type"}

    deleted, error = api.delete_donation("missing")
    assert deleted is False
    assert error["status_code"] == 404


def test_client_reports_transport_errors():
    api = DonationApiClient(base_url="http://localhost:1", session=UnreachableSession())

    donations, error = api.list_donations()

    assert donations == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_client_health(api):
    body, error = api.health()
    assert error is None
    assert body["status"] == "healthy"


def test_board_keeps_local_list_in_sync(api):
    board = DonationBoard(api)
    assert board.refresh() is True
    assert board.donations == []

    first = board.create(make_draft(donorName="First"))
    second = board.create(make_draft(donorName="Second"))
    assert [d["id"] for d in board.donations] == [second["id"], first["id"]]

    board.update(first["id"], {"quantity": 7})
    assert board.donations[1]["quantity"] == 7
    assert board.donations[0] == second

    assert board.delete(second["id"]) is True
    assert [d["id"] for d in board.donations] == [first["id"]]

    server_side, _ = api.list_donations()
    assert board.donations == server_side


def test_board_leaves_state_alone_on_failure(api):
    board = DonationBoard(api)
    created = board.create(make_draft())

    assert board.update("missing", {"quantity": 1}) is None
    assert board.error == "Donation not found"
    assert board.delete("missing") is False
    assert board.create(make_draft(date="garbage")) is None
    assert board.error == "Invalid date format"
    assert board.donations == [created]


def test_form_validation_messages():
    errors = validate_donation_form(
        {"donorName": "  ", "type": "", "quantity": "0", "unit": "", "date": "not a date"}
    )

    assert errors == {
        "donorName": "Donor name is required",
        "type": "Donation type is required",
        "quantity": "Quantity must be greater than 0",
        "unit": "Unit is required",
        "date": "Valid date is required",
    }


def test_valid_form_builds_trimmed_draft():
    form = {
        "donorName": "  Seattle Food Bank ",
        "type": "food",
        "quantity": "50",
        "unit": " pounds ",
        "date": "2024-01-14T10:30:00.000Z",
        "notes": "   ",
    }

    assert validate_donation_form(form) == {}
    assert build_draft(form) == {
        "donorName": "Seattle Food Bank",
        "type": "food",
        "quantity": 50.0,
        "unit": "pounds",
        "date": "2024-01-14T10:30:00.000Z",
    }


def test_display_helpers():
    assert format_donation_type("household_items") == "Household Items"
    assert format_donation_type("money") == "Money"
    assert format_date("2024-01-15T08:00:00.000Z") == "Jan 15, 2024"
