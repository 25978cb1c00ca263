import os
import tempfile

# Settings() is built at import time; give it something before the app loads
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///" + os.path.join(tempfile.gettempdir(), "restaurant_reservations.db"),
)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from backend.app.core.config import Settings  # noqa: E402
from backend.app.db.models import Reservation  # noqa: E402
from backend.app.db.session import close_database, init_database  # noqa: E402
from backend.app.main import create_app  # noqa: E402


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    # TEST_DATABASE_URL points the suite at Postgres; default is a fresh SQLite file
    url = os.getenv("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'reservations.db'}"
    return Settings(
        DATABASE_URL=url,
        DB_CREATE_TABLES=True,
        FRONTEND_URL="http://localhost:5173",
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture
async def app(test_settings):
    # ASGITransport doesn't run the lifespan, so start the database by hand
    app = create_app(test_settings)
    await init_database(app, test_settings)
    try:
        yield app
    finally:
        await close_database(app)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def count_reservations(app):
    async def _count(**filters) -> int:
        query = select(func.count()).select_from(Reservation)
        for column, value in filters.items():
            query = query.where(getattr(Reservation, column) == value)
        async with app.state.database.sessionmaker() as session:
            return (await session.execute(query)).scalar_one()

    return _count


@pytest.fixture
def reservation_payload() -> dict[str, str]:
    return {
        "firstName": "John",
        "lastName": "Smith",
        "email": "john@example.com",
        "phone": "1234567890",
        "date": "2025-01-01",
        "time": "19:00",
    }
