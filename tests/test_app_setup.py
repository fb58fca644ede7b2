import logging

import pytest
from fastapi.testclient import TestClient

from ticket_tracker.core.config import Settings, get_settings
from ticket_tracker.core.logging import configure_logging
from ticket_tracker.main import build_ticket_service, create_app


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_from_environment(monkeypatch, clear_settings_cache):
    monkeypatch.setenv("SEED_SAMPLE_TICKETS", "false")
    monkeypatch.setenv("ID_PREFIX", "req")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.seed_sample_tickets is False
    assert settings.id_prefix == "req"
    assert settings.log_level == "debug"
    assert get_settings() is settings


def test_configure_logging_sets_level():
    settings = Settings(app_name="tracker-test", log_level="warning")

    logger = configure_logging(settings)

    assert logger.name == "tracker-test"
    assert logger.level == logging.WARNING


def test_build_ticket_service_seeds_samples():
    service = build_ticket_service(Settings(seed_sample_tickets=True))

    tickets = service.list_tickets()
    assert [ticket.id for ticket in tickets] == ["1", "2", "3", "4", "5"]
    assert tickets[0].rating == 5


def test_build_ticket_service_uses_configured_prefix():
    service = build_ticket_service(Settings(seed_sample_tickets=False, id_prefix="req"))

    ticket = service.create_ticket(title="A", description="a")

    assert service.list_tickets() == [ticket]
    assert ticket.id.startswith("req_")


def test_lifespan_installs_ticket_service(monkeypatch, clear_settings_cache):
    monkeypatch.setenv("SEED_SAMPLE_TICKETS", "true")

    with TestClient(create_app()) as client:
        response = client.get("/tickets")

    assert response.status_code == 200
    assert len(response.json()) == 5
