from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .errors import LifecycleViolation, RatingNotAllowed, TicketNotFoundError, TicketValidationError
from .models import Ticket, TicketPatch
from .rating import RatingPolicy
from .state import TicketLifecycle, TicketStatus
from .store import TicketStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TicketService:
    """Guarded ticket operations used by the presentation layer.

    Every call delegates to :class:`TicketStore` after applying the lifecycle
    and rating policies, and returns a fresh copy of the affected ticket.
    """

    store: TicketStore = field(default_factory=TicketStore)

    def list_tickets(self) -> list[Ticket]:
        return self.store.list()

    def get_ticket(self, ticket_id: str) -> Ticket:
        ticket = self.store.get(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(f"Ticket {ticket_id} not found")
        return ticket

    def create_ticket(self, *, title: str, description: str) -> Ticket:
        ticket_id = self.store.create(title, description)
        if ticket_id is None:
            logger.warning("Rejected ticket without title or description")
            raise TicketValidationError("Title and description are required")
        logger.info("Ticket %s created", ticket_id)
        return self.get_ticket(ticket_id)

    def edit_ticket(
        self,
        ticket_id: str,
        *,
        title: str | None = None,
        description: str | None = None,
        status: TicketStatus | None = None,
    ) -> Ticket:
        current = self.get_ticket(ticket_id)

        new_title = _clean(title, "Title")
        new_description = _clean(description, "Description")
        content_changed = (new_title is not None and new_title != current.title) or (
            new_description is not None and new_description != current.description
        )
        if content_changed and not TicketLifecycle.can_edit_content(current.status):
            logger.warning("Rejected content edit on ticket %s in status %s", ticket_id, current.status.value)
            raise LifecycleViolation(
                f"Title and description can only be changed while the ticket is {TicketStatus.CREATED.value!r}",
                current=current.status,
            )

        self.store.update(
            ticket_id,
            TicketPatch(title=new_title, description=new_description, status=status),
        )
        logger.info("Ticket %s updated", ticket_id)
        return self.get_ticket(ticket_id)

    def delete_ticket(self, ticket_id: str) -> None:
        if ticket_id not in self.store:
            logger.debug("Ignoring removal of unknown ticket %s", ticket_id)
            return
        self.store.remove(ticket_id)
        logger.info("Ticket %s removed", ticket_id)

    def start_ticket(self, ticket_id: str) -> Ticket:
        current = self.get_ticket(ticket_id)
        return self._apply_status(ticket_id, self._guard(ticket_id, TicketLifecycle.start, current.status))

    def complete_ticket(self, ticket_id: str) -> Ticket:
        current = self.get_ticket(ticket_id)
        return self._apply_status(ticket_id, self._guard(ticket_id, TicketLifecycle.complete, current.status))

    def change_status(self, ticket_id: str, *, new_status: TicketStatus, strict: bool = False) -> Ticket:
        """Write ``new_status``; with ``strict`` only one forward step is allowed."""

        current = self.get_ticket(ticket_id)
        if strict:
            try:
                TicketLifecycle.assert_transition(current.status, new_status)
            except LifecycleViolation:
                logger.warning(
                    "Rejected status change on ticket %s: %s -> %s",
                    ticket_id,
                    current.status.value,
                    new_status.value,
                )
                raise
        return self._apply_status(ticket_id, new_status)

    def rate_ticket(self, ticket_id: str, rating: int) -> Ticket:
        current = self.get_ticket(ticket_id)
        try:
            RatingPolicy.check(current, rating)
        except RatingNotAllowed as exc:
            logger.warning("Rejected rating for ticket %s: %s", ticket_id, exc)
            raise
        self.store.set_rating(ticket_id, rating)
        logger.info("Ticket %s rated %d", ticket_id, rating)
        return self.get_ticket(ticket_id)

    def _guard(
        self,
        ticket_id: str,
        action: Callable[[TicketStatus], TicketStatus],
        status: TicketStatus,
    ) -> TicketStatus:
        try:
            return action(status)
        except LifecycleViolation as exc:
            logger.warning("Rejected %s on ticket %s: %s", action.__name__, ticket_id, exc)
            raise

    def _apply_status(self, ticket_id: str, status: TicketStatus) -> Ticket:
        self.store.set_status(ticket_id, status)
        logger.info("Ticket %s moved to %s", ticket_id, status.value)
        return self.get_ticket(ticket_id)


def _clean(value: str | None, label: str) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned:
        raise TicketValidationError(f"{label} cannot be blank")
    return cleaned
