from datetime import datetime
from itertools import count

import pytest

from ticket_tracker.tickets.identity import Clock, IdentifierGenerator
from ticket_tracker.tickets.service import TicketService
from ticket_tracker.tickets.store import TicketStore


class SequentialIdGenerator(IdentifierGenerator):
    def __init__(self):
        super().__init__()
        self._counter = count(1)

    def next(self) -> str:
        return f"t-{next(self._counter)}"


@pytest.fixture
def fixed_clock():
    return Clock(now_source=lambda: datetime(2025, 10, 6, 9, 5))


@pytest.fixture
def store(fixed_clock):
    return TicketStore(id_generator=SequentialIdGenerator(), clock=fixed_clock)


@pytest.fixture
def service(store):
    return TicketService(store=store)
