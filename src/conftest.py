import contextlib
from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.rsvps.deadline import EventConfig
from src.rsvps.dependencies import (
    get_clock,
    get_event_config,
    get_rsvp_read_model,
    get_rsvp_write_model,
)
from src.rsvps.repository.tests.inmemory_models import (
    InMemoryRsvpReadModel,
    InMemoryRsvpStore,
    InMemoryRsvpWriteModel,
)

TEST_EVENT = EventConfig(
    name="Test Party",
    date=datetime(2026, 8, 15, 16, 0, tzinfo=UTC),
    location="Test Hall",
    rsvp_deadline=datetime(2026, 7, 15, 23, 59, tzinfo=UTC),
)
BEFORE_DEADLINE = datetime(2026, 7, 1, 12, 0, tzinfo=UTC)
AFTER_DEADLINE = datetime(2026, 7, 20, 12, 0, tzinfo=UTC)


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client with no overrides."""
    async with client_factory() as ac:
        yield ac


@pytest.fixture
def rsvp_store():
    """Fresh in-memory RSVP storage for each test."""
    return InMemoryRsvpStore()


@pytest.fixture
def rsvp_overrides(rsvp_store):
    """Overrides wiring the in-memory store, the test event and a clock before the deadline."""
    return {
        get_rsvp_read_model: lambda: InMemoryRsvpReadModel(rsvp_store),
        get_rsvp_write_model: lambda: InMemoryRsvpWriteModel(rsvp_store),
        get_event_config: lambda: TEST_EVENT,
        get_clock: lambda: lambda: BEFORE_DEADLINE,
    }


@pytest.fixture
def after_deadline_overrides(rsvp_overrides):
    return {**rsvp_overrides, get_clock: lambda: lambda: AFTER_DEADLINE}
