"""Ticket domain models, policies and the in-memory store."""

from .errors import (
    InvalidRating,
    LifecycleViolation,
    RatingNotAllowed,
    TicketError,
    TicketNotFoundError,
    TicketValidationError,
)
from .identity import Clock, IdentifierGenerator
from .models import Ticket, TicketPatch
from .rating import RatingPolicy
from .service import TicketService
from .state import TicketLifecycle, TicketStatus
from .store import TicketStore

__all__ = [
    "Clock",
    "IdentifierGenerator",
    "InvalidRating",
    "LifecycleViolation",
    "RatingNotAllowed",
    "RatingPolicy",
    "Ticket",
    "TicketError",
    "TicketLifecycle",
    "TicketNotFoundError",
    "TicketPatch",
    "TicketService",
    "TicketStatus",
    "TicketStore",
    "TicketValidationError",
]
