"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from foodgraph.config import Settings, get_settings
from foodgraph.database.client import DataAccessClient
from foodgraph.dbmodels import (
    AminoAcids,
    Base,
    Categories,
    FattyAcids,
    Foods,
    Nutrients,
    Units,
)

SQLITE_URL = "sqlite+aiosqlite://"


def seed_rows() -> list[Base]:
    """A small food composition table with two categories."""
    return [
        Categories(id=1, name="Cereals"),
        Categories(id=2, name="Vegetables and fruits"),
        Foods(id=1, name="Rice, brown, cooked", category_id=1),
        Foods(id=2, name="Rice, white, cooked", category_id=1),
        Foods(id=3, name="Bread, wheat", category_id=1),
        Foods(id=4, name="Wild rice flour", category_id=1),
        Foods(id=5, name="Lettuce, raw", category_id=2),
        Foods(id=6, name="Broccoli, raw", category_id=2),
        Foods(id=7, name="Orange juice 100%", category_id=2),
        Nutrients(
            id=1,
            food_id=1,
            moisture=70.1,
            kcal=124.0,
            kj=517.0,
            protein=2.6,
            lipids=1.0,
            carbohydrates=25.8,
            dietary_fiber=2.7,
            vitamin_c=None,
        ),
        Nutrients(id=2, food_id=2, kcal=128.0, kj=535.0, protein=2.5),
        Nutrients(id=3, food_id=5, kcal=11.0, kj=46.0, vitamin_c=15.6),
        AminoAcids(id=1, food_id=1, leucine=0.21, lysine=0.1, glutamic_acid=0.5),
        FattyAcids(
            id=1,
            food_id=1,
            saturated=0.3,
            monounsaturated=0.4,
            polyunsaturated=0.3,
            eighteen_two_n6=0.28,
        ),
        Units(
            id=1,
            field_name="kcal",
            unit="kcal",
            label_pt="Energia",
            infoods_tagname="ENERC_KCAL",
        ),
        Units(
            id=2,
            field_name="protein",
            unit="g",
            label_pt="Proteína",
            infoods_tagname="PROCNT",
        ),
        Units(
            id=3,
            field_name="vitaminC",
            unit="mg",
            label_pt="Vitamina C",
            infoods_tagname="VITC",
            systematic_name="ascorbic acid",
            common_name="vitamin C",
        ),
    ]


def _sqlite_client() -> DataAccessClient:
    engine = create_async_engine(
        SQLITE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return DataAccessClient(session_factory, engine=engine)


@pytest_asyncio.fixture(scope="function")
async def data_client() -> AsyncGenerator[DataAccessClient, None]:
    """Data access client over a seeded in-memory SQLite store."""
    client = _sqlite_client()
    async with client.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with client.session() as session:
        session.add_all(seed_rows())
        await session.commit()

    yield client
    await client.dispose()


@pytest_asyncio.fixture(scope="function")
async def empty_store_client() -> AsyncGenerator[DataAccessClient, None]:
    """Data access client over a store without any tables."""
    client = _sqlite_client()
    yield client
    await client.dispose()


@pytest.fixture
def settings() -> Settings:
    return Settings(node_env="development", _env_file=None)


@pytest_asyncio.fixture(scope="function")
async def graphql_client(
    settings: Settings, data_client: DataAccessClient
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an app wired to the seeded store."""
    from foodgraph.api.app import create_app

    app = create_app(settings, client=data_client)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def execute(graphql_client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """POST a GraphQL request and return the decoded response body."""

    async def _execute(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = await graphql_client.post("/graphql", json=payload)
        return response.json()

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables and cached settings for each test."""
    original_env = os.environ.copy()
    get_settings.cache_clear()
    yield
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
