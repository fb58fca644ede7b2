from __future__ import annotations

import logging
from typing import Iterable

from .identity import Clock, IdentifierGenerator
from .models import Ticket, TicketPatch
from .state import TicketLifecycle, TicketStatus

logger = logging.getLogger(__name__)


class TicketStore:
    """In-memory owner of the ticket collection, newest ticket first.

    The store is deliberately forgiving: unknown ids are ignored and status or
    rating writes are applied as given. Policy checks live in
    :class:`~ticket_tracker.tickets.service.TicketService`.
    """

    def __init__(
        self,
        *,
        id_generator: IdentifierGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._id_generator = id_generator or IdentifierGenerator()
        self._clock = clock or Clock()
        self._tickets: list[Ticket] = []

    def __len__(self) -> int:
        return len(self._tickets)

    def __contains__(self, ticket_id: object) -> bool:
        return self._find(ticket_id) is not None

    def seed(self, tickets: Iterable[Ticket]) -> None:
        """Load an initial ticket set; the first item becomes the head of the list."""

        seen = {ticket.id for ticket in self._tickets}
        seeded: list[Ticket] = []
        for ticket in tickets:
            if ticket.id in seen:
                logger.debug("Skipping seeded ticket with duplicate id %s", ticket.id)
                continue
            seen.add(ticket.id)
            seeded.append(ticket.copy())
        self._tickets = seeded + self._tickets
        logger.debug("Seeded %d tickets", len(seeded))

    def create(self, title: str, description: str) -> str | None:
        title = (title or "").strip()
        description = (description or "").strip()
        if not title or not description:
            logger.debug("Ignoring ticket without title or description")
            return None

        ticket_id = self._id_generator.next()
        while ticket_id in self:
            ticket_id = self._id_generator.next()

        ticket = Ticket(
            id=ticket_id,
            title=title,
            description=description,
            status=TicketLifecycle.initial_state(),
            created_at=self._clock.now(),
        )
        self._tickets.insert(0, ticket)
        logger.debug("Created ticket %s", ticket_id)
        return ticket_id

    def update(self, ticket_id: str, patch: TicketPatch) -> None:
        ticket = self._find(ticket_id)
        if ticket is None:
            return
        # blank content is ignored so title and description never become empty
        title = (patch.title or "").strip()
        if title:
            ticket.title = title
        description = (patch.description or "").strip()
        if description:
            ticket.description = description
        if patch.status is not None:
            ticket.status = TicketStatus(patch.status)

    def remove(self, ticket_id: str) -> None:
        self._tickets = [ticket for ticket in self._tickets if ticket.id != ticket_id]

    def set_status(self, ticket_id: str, status: TicketStatus) -> None:
        ticket = self._find(ticket_id)
        if ticket is not None:
            ticket.status = TicketStatus(status)

    def set_rating(self, ticket_id: str, rating: int) -> None:
        ticket = self._find(ticket_id)
        if ticket is not None:
            ticket.rating = rating

    def get(self, ticket_id: str) -> Ticket | None:
        ticket = self._find(ticket_id)
        return None if ticket is None else ticket.copy()

    def list(self) -> list[Ticket]:
        return [ticket.copy() for ticket in self._tickets]

    def _find(self, ticket_id: object) -> Ticket | None:
        for ticket in self._tickets:
            if ticket.id == ticket_id:
                return ticket
        return None
