from __future__ import annotations

from dataclasses import dataclass, replace

from .state import TicketStatus


@dataclass(slots=True)
class Ticket:
    """Support ticket tracked by the store."""

    id: str
    title: str
    description: str
    status: TicketStatus
    created_at: str
    rating: int | None = None

    def copy(self) -> Ticket:
        return replace(self)


@dataclass(slots=True, frozen=True)
class TicketPatch:
    """Partial update for a ticket; ``None`` fields are left untouched."""

    title: str | None = None
    description: str | None = None
    status: TicketStatus | None = None

    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.status is None
