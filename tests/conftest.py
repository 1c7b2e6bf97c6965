"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from dealfeed.main import app
from dealfeed.stores.memory import MemStorage, get_storage


class TickingClock:
    """Deterministic clock: every reading is ``step`` later than the previous one."""

    def __init__(self, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def storage(clock: TickingClock) -> MemStorage:
    """Empty store with a ticking clock."""
    return MemStorage(clock=clock)


@pytest.fixture
async def client(storage: MemStorage):
    """Test client bound to the ``storage`` fixture."""
    app.dependency_overrides[get_storage] = lambda: storage
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
