"""Shared fixtures: a fresh in-memory database per test and an app client."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from bank_account_service.core.config import DatabaseSettings, SeedSettings, Settings
from bank_account_service.infrastructure.database.session import Database
from bank_account_service.main import create_app
from bank_account_service.modules.accounts import AccountMapper


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def mapper(clock):
    counter = iter(range(1, 10_000))
    return AccountMapper(id_factory=lambda: f"acc-{next(counter):04d}", clock=clock)


@pytest_asyncio.fixture
async def database():
    db = Database.from_settings(DatabaseSettings())
    await db.init_models()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s


@pytest.fixture
def settings():
    return Settings(environment="test", seed=SeedSettings(enabled=False))


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    seeded = Settings(
        environment="test",
        seed=SeedSettings(enabled=True, customers=["Hanae", "Imane"], accounts_per_customer=3),
    )
    app = create_app(seeded)
    with TestClient(app) as test_client:
        yield test_client
