from contextlib import asynccontextmanager

from fastapi import FastAPI

from ticket_tracker.api.routes import ping, tickets
from ticket_tracker.core.config import Settings, get_settings
from ticket_tracker.core.logging import configure_logging
from ticket_tracker.tickets.identity import Clock, IdentifierGenerator
from ticket_tracker.tickets.samples import SAMPLE_TICKETS
from ticket_tracker.tickets.service import TicketService
from ticket_tracker.tickets.store import TicketStore


def build_ticket_service(settings: Settings) -> TicketService:
    """Create the store and guarded service described by ``settings``."""

    store = TicketStore(
        id_generator=IdentifierGenerator(prefix=settings.id_prefix),
        clock=Clock(fmt=settings.timestamp_format),
    )
    if settings.seed_sample_tickets:
        store.seed(SAMPLE_TICKETS)
    return TicketService(store=store)


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - executed by framework
    settings = get_settings()
    logger = configure_logging(settings)

    app.state.ticket_service = build_ticket_service(settings)
    logger.info("Ticket store ready with %d tickets", len(app.state.ticket_service.store))
    try:
        yield
    finally:
        app.state.ticket_service = None


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(ping.router)
    app.include_router(tickets.router)
    return app


app = create_app()
