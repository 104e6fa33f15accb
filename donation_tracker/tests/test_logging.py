import logging

import pytest
from fastapi.testclient import TestClient
from uvicorn.logging import DefaultFormatter

from donation_tracker.app.core.config import Settings
from donation_tracker.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_PREFIX,
    build_console_formatter,
    setup_logging,
)
from donation_tracker.app.main import create_app
from donation_tracker.app.services.donation_service import DonationStore
from donation_tracker.tests.conftest import make_draft


@pytest.fixture
def remove_file_handlers():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(FILE_HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()


def test_log_file_receives_store_activity(tmp_path, remove_file_handlers):
    log_path = tmp_path / "donations.log"
    app = create_app(
        store=DonationStore(),
        app_settings=Settings(log_file=str(log_path), log_level="INFO", seed_sample_data=False),
    )
    client = TestClient(app)

    created = client.post("/donations", json=make_draft()).json()
    client.delete(f"/donations/{created['id']}")

    contents = log_path.read_text(encoding="utf-8")
    assert f"Created donation {created['id']} from John Smith" in contents
    assert f"Deleted donation {created['id']}" in contents
    assert "[INFO] donation_tracker.app.services.donation_service:" in contents


def test_repeated_setup_does_not_duplicate_handlers(tmp_path, remove_file_handlers):
    log_path = tmp_path / "app.log"

    for _ in range(3):
        setup_logging("INFO", str(log_path), "development")

    names = [handler.get_name() for handler in logging.getLogger().handlers]
    assert names.count(CONSOLE_HANDLER_NAME) == 1
    assert len([name for name in names if (name or "").startswith(FILE_HANDLER_PREFIX)]) == 1


def test_console_format_depends_on_environment():
    pretty = build_console_formatter("development")
    plain = build_console_formatter("production")

    assert isinstance(pretty, DefaultFormatter)
    assert not isinstance(plain, DefaultFormatter)

    record = logging.LogRecord("donation_tracker", logging.WARNING, __file__, 1, "low stock", None, None)
    assert "[WARNING] donation_tracker: low stock" in plain.format(record)
    assert "low stock" in pretty.format(record)
