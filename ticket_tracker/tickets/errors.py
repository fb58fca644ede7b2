from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import TicketStatus


class TicketError(RuntimeError):
    """Base error for guarded ticket operations."""


class TicketNotFoundError(TicketError):
    """Raised when a ticket could not be located."""


class TicketValidationError(TicketError):
    """Raised when ticket content is missing or blank."""


class LifecycleViolation(TicketError):
    """Raised when a status change or content edit breaks the lifecycle rules."""

    def __init__(self, message: str, *, current: TicketStatus, target: TicketStatus | None = None) -> None:
        super().__init__(message)
        self.current = current
        self.target = target


class RatingNotAllowed(TicketError):
    """Raised when a ticket cannot accept a rating in its current state."""


class InvalidRating(RatingNotAllowed, ValueError):
    """Raised when a rating value falls outside the accepted range."""
