from __future__ import annotations

from .errors import InvalidRating, RatingNotAllowed
from .models import Ticket
from .state import TicketStatus

MIN_RATING = 1
MAX_RATING = 5


class RatingPolicy:
    """Advisory rules for attaching a rating to a ticket.

    ``TicketStore.set_rating`` overwrites whatever it is given; callers run
    :meth:`check` first when they want the rating to be set only once, and
    only on completed tickets.
    """

    @classmethod
    def can_rate(cls, ticket: Ticket) -> bool:
        return ticket.status == TicketStatus.COMPLETED and ticket.rating is None

    @classmethod
    def is_valid_value(cls, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return MIN_RATING <= value <= MAX_RATING

    @classmethod
    def check(cls, ticket: Ticket, value: object) -> None:
        if not cls.is_valid_value(value):
            raise InvalidRating(f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}, got {value!r}")
        if ticket.status != TicketStatus.COMPLETED:
            raise RatingNotAllowed(f"Ticket {ticket.id} is {ticket.status.value!r}; only completed tickets can be rated")
        if ticket.rating is not None:
            raise RatingNotAllowed(f"Ticket {ticket.id} is already rated ({ticket.rating})")
