from __future__ import annotations

from enum import Enum
from typing import Mapping

from .errors import LifecycleViolation


class TicketStatus(str, Enum):
    """Supported states for a ticket's lifecycle."""

    CREATED = "Created"
    UNDER_ASSISTANCE = "Under Assistance"
    COMPLETED = "Completed"


class TicketLifecycle:
    """Forward progression rules and content-edit gating for tickets.

    The store accepts any status write; this class is what callers consult when
    they want the ``Created -> Under Assistance -> Completed`` ordering honoured.
    """

    _FORWARD: Mapping[TicketStatus, TicketStatus] = {
        TicketStatus.CREATED: TicketStatus.UNDER_ASSISTANCE,
        TicketStatus.UNDER_ASSISTANCE: TicketStatus.COMPLETED,
    }

    _ACTIONS: Mapping[TicketStatus, str] = {
        TicketStatus.CREATED: "start",
        TicketStatus.UNDER_ASSISTANCE: "complete",
    }

    @classmethod
    def initial_state(cls) -> TicketStatus:
        return TicketStatus.CREATED

    @classmethod
    def is_terminal(cls, status: TicketStatus) -> bool:
        return status not in cls._FORWARD

    @classmethod
    def next_action(cls, status: TicketStatus) -> str | None:
        """Name of the forward action offered for ``status``, if any."""

        return cls._ACTIONS.get(status)

    @classmethod
    def start(cls, status: TicketStatus) -> TicketStatus:
        if status != TicketStatus.CREATED:
            raise LifecycleViolation(
                f"Cannot start a ticket in status {status.value!r}",
                current=status,
                target=TicketStatus.UNDER_ASSISTANCE,
            )
        return TicketStatus.UNDER_ASSISTANCE

    @classmethod
    def complete(cls, status: TicketStatus) -> TicketStatus:
        if status != TicketStatus.UNDER_ASSISTANCE:
            raise LifecycleViolation(
                f"Cannot complete a ticket in status {status.value!r}",
                current=status,
                target=TicketStatus.COMPLETED,
            )
        return TicketStatus.COMPLETED

    @classmethod
    def can_edit_content(cls, status: TicketStatus | None) -> bool:
        """Title and description are editable for new tickets and while ``Created``."""

        return status is None or status == TicketStatus.CREATED

    @classmethod
    def can_transition(cls, current: TicketStatus, target: TicketStatus) -> bool:
        if current == target:
            return True
        return cls._FORWARD.get(current) == target

    @classmethod
    def assert_transition(cls, current: TicketStatus, target: TicketStatus) -> None:
        if not cls.can_transition(current, target):
            raise LifecycleViolation(
                f"Invalid ticket status transition: {current.value} -> {target.value}",
                current=current,
                target=target,
            )
