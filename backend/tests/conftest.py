import asyncio
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from board_service.main import app
from board_service.database import get_session, Base, seed_db

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
def db_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async def setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with session_maker() as session:
            await seed_db(session)

    asyncio.run(setup())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def client(db_engine):
    test_session_maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def tokens(client):
    """Login tokens for the seeded users, keyed by name."""

    def login(name):
        resp = client.post("/api/auth/login", json={"name": name, "password": "password"})
        return resp.json()["token"]

    return {name: login(name) for name in ("user", "alice", "bob")}


@pytest.fixture
def gql(client):
    def execute(query, **variables):
        resp = client.post("/graphql", json={"query": query, "variables": variables})
        assert resp.status_code == 200
        return resp.json()

    return execute
