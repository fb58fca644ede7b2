"""Tickets loaded at startup when ``seed_sample_tickets`` is enabled."""

from __future__ import annotations

from .models import Ticket
from .state import TicketStatus

SAMPLE_TICKETS: tuple[Ticket, ...] = (
    Ticket(
        id="1",
        title="Login button not responding",
        description="The login button does not work on mobile devices when tapped multiple times.",
        status=TicketStatus.COMPLETED,
        created_at="2025-10-05 14:32",
        rating=5,
    ),
    Ticket(
        id="2",
        title="Dashboard loading slowly",
        description="Dashboard takes more than 10 seconds to load all widgets and data.",
        status=TicketStatus.UNDER_ASSISTANCE,
        created_at="2025-10-06 09:15",
    ),
    Ticket(
        id="3",
        title="Email notifications not sent",
        description="Users report not receiving email notifications for ticket updates.",
        status=TicketStatus.CREATED,
        created_at="2025-10-06 16:45",
    ),
    Ticket(
        id="4",
        title="Profile picture upload fails",
        description="Error message appears when trying to upload profile pictures larger than 2MB.",
        status=TicketStatus.COMPLETED,
        created_at="2025-10-04 11:20",
        rating=4,
    ),
    Ticket(
        id="5",
        title="Search function returns no results",
        description="The search bar does not return any results even with valid keywords.",
        status=TicketStatus.UNDER_ASSISTANCE,
        created_at="2025-10-07 08:00",
    ),
)
