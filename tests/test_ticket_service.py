import logging

import pytest

from ticket_tracker.tickets.errors import (
    InvalidRating,
    LifecycleViolation,
    RatingNotAllowed,
    TicketNotFoundError,
    TicketValidationError,
)
from ticket_tracker.tickets.state import TicketStatus


def test_create_ticket_returns_created_ticket(service, caplog):
    with caplog.at_level(logging.INFO, logger="ticket_tracker.tickets.service"):
        ticket = service.create_ticket(title="Login bug", description="Button unresponsive")

    assert ticket.status == TicketStatus.CREATED
    assert service.list_tickets()[0].id == ticket.id
    assert f"Ticket {ticket.id} created" in caplog.text


def test_create_ticket_rejects_blank_content(service):
    with pytest.raises(TicketValidationError):
        service.create_ticket(title="  ", description="Body")

    assert service.list_tickets() == []


def test_get_ticket_raises_for_unknown_id(service):
    with pytest.raises(TicketNotFoundError):
        service.get_ticket("missing")


def test_start_and_complete_follow_lifecycle(service):
    ticket = service.create_ticket(title="Login bug", description="Button unresponsive")

    started = service.start_ticket(ticket.id)
    assert started.status == TicketStatus.UNDER_ASSISTANCE

    with pytest.raises(LifecycleViolation):
        service.start_ticket(ticket.id)

    completed = service.complete_ticket(ticket.id)
    assert completed.status == TicketStatus.COMPLETED

    with pytest.raises(LifecycleViolation):
        service.complete_ticket(ticket.id)


def test_complete_rejected_from_created(service, caplog):
    ticket = service.create_ticket(title="A", description="a")

    with caplog.at_level(logging.WARNING, logger="ticket_tracker.tickets.service"):
        with pytest.raises(LifecycleViolation):
            service.complete_ticket(ticket.id)

    assert service.get_ticket(ticket.id).status == TicketStatus.CREATED
    assert "Rejected complete" in caplog.text


def test_change_status_is_permissive_unless_strict(service):
    ticket = service.create_ticket(title="A", description="a")

    jumped = service.change_status(ticket.id, new_status=TicketStatus.COMPLETED)
    assert jumped.status == TicketStatus.COMPLETED

    with pytest.raises(LifecycleViolation):
        service.change_status(ticket.id, new_status=TicketStatus.CREATED, strict=True)
    assert service.get_ticket(ticket.id).status == TicketStatus.COMPLETED

    regressed = service.change_status(ticket.id, new_status=TicketStatus.CREATED)
    assert regressed.status == TicketStatus.CREATED


def test_edit_ticket_changes_content_while_created(service):
    ticket = service.create_ticket(title="A", description="a")

    edited = service.edit_ticket(ticket.id, title=" New title ", description="New body")

    assert edited.title == "New title"
    assert edited.description == "New body"


def test_edit_ticket_blocks_content_changes_after_start(service):
    ticket = service.create_ticket(title="A", description="a")
    service.start_ticket(ticket.id)

    with pytest.raises(LifecycleViolation):
        service.edit_ticket(ticket.id, title="Other")

    assert service.get_ticket(ticket.id).title == "A"


def test_edit_ticket_accepts_unchanged_content_with_status_change(service):
    ticket = service.create_ticket(title="A", description="a")
    service.change_status(ticket.id, new_status=TicketStatus.COMPLETED)

    edited = service.edit_ticket(ticket.id, title="A", description="a", status=TicketStatus.CREATED)

    assert edited.status == TicketStatus.CREATED


def test_edit_ticket_rejects_blank_values(service):
    ticket = service.create_ticket(title="A", description="a")

    with pytest.raises(TicketValidationError):
        service.edit_ticket(ticket.id, description="   ")


def test_rate_ticket_applies_policy(service):
    ticket = service.create_ticket(title="A", description="a")

    with pytest.raises(RatingNotAllowed):
        service.rate_ticket(ticket.id, 4)

    service.start_ticket(ticket.id)
    service.complete_ticket(ticket.id)

    with pytest.raises(InvalidRating):
        service.rate_ticket(ticket.id, 7)

    rated = service.rate_ticket(ticket.id, 4)
    assert rated.rating == 4

    with pytest.raises(RatingNotAllowed):
        service.rate_ticket(ticket.id, 1)
    assert service.get_ticket(ticket.id).rating == 4


def test_delete_ticket_is_forgiving(service):
    ticket = service.create_ticket(title="A", description="a")

    service.delete_ticket(ticket.id)
    service.delete_ticket(ticket.id)

    assert service.list_tickets() == []


def test_delete_unknown_ticket_logs_at_debug(service, caplog):
    ticket = service.create_ticket(title="A", description="a")

    with caplog.at_level(logging.DEBUG, logger="ticket_tracker.tickets.service"):
        service.delete_ticket("missing")
        service.delete_ticket(ticket.id)

    records = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.DEBUG, "Ignoring removal of unknown ticket missing") in records
    assert (logging.INFO, f"Ticket {ticket.id} removed") in records
    assert (logging.INFO, "Ticket missing removed") not in records
