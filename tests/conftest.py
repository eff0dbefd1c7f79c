import os

# Must be set before the application modules read their configuration.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET"] = "test-secret"
os.environ["LOG_FILE"] = ""

from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from db.models import Category, Product, Subcategory
from db.session import Base, get_db
from main import app
from modules.auth.schema import AuthenticatedUser
from modules.auth.service import create_access_token


@pytest.fixture
def db_url(tmp_path):
    """Fresh SQLite file per test, with schema and a small furniture catalog."""
    path = tmp_path / "shop.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all([
            Category(id=1, name="Living room", description="Sofas and tables", image="/uploads/living.jpg"),
            Category(id=2, name="Bedroom", image="/uploads/bedroom.jpg"),
            Subcategory(id=1, name="Coffee tables", image="/uploads/tables.jpg", category_id=1),
            Subcategory(id=2, name="Sofas", category_id=1),
            Subcategory(id=3, name="Beds", category_id=2),
            Product(id=7, name="Lund oak coffee table", price=Decimal("45990.00"), stock_quantity=3,
                    image="/uploads/lund.jpg", ar_model_path="/uploads/lund.glb", rating=4.6,
                    subcategory_id=1),
            Product(id=9, name="Malmo glass table", price=Decimal("31990.00"), stock_quantity=0,
                    image="/uploads/malmo.jpg", subcategory_id=1),
            Product(id=11, name="Side table", price=Decimal("12500.00"), stock_quantity=5,
                    image="/uploads/side.jpg", ar_model_path="   ", subcategory_id=1),
            Product(id=21, name="Oslo corner sofa", price=Decimal("289990.00"), stock_quantity=1,
                    image="/uploads/oslo.jpg", subcategory_id=2),
        ])
        session.commit()
    engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def test_client(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)
    session_maker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session_maker(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)
    yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def user():
    return AuthenticatedUser(id=42)


@pytest.fixture
def auth_headers():
    def _headers(user_id: int = 42) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return _headers
