import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.database.mongo import init_mongo
from app.main import app


@pytest.fixture
async def mongo_db():
    """Fresh in-memory database with every Beanie document registered."""
    client = AsyncMongoMockClient(tz_aware=True)
    database = client[f"test_{uuid.uuid4().hex}"]
    await init_mongo(database)
    yield database


@pytest.fixture
async def client(mongo_db):
    # ASGITransport skips the lifespan, so no real MongoDB is contacted
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
