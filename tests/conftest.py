# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Each test gets its own SQLite database file (aiosqlite) with the schema
# created from the models and a small two-project catalog.
# =============================================================================

import os

# Settings are read at import time, so the environment goes first
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_USER", "pos")
os.environ.setdefault("DB_PASSWORD", "pos")
os.environ.setdefault("DB_NAME", "pos_test")
os.environ.setdefault("DEBUG", "false")

from decimal import Decimal

import httpx
import pytest

from pos_backend.db.session import create_database
from pos_backend.main import create_app
from pos_backend.models import Product, Project, Topping


@pytest.fixture
async def database(tmp_path):
    db = create_database(f"sqlite+aiosqlite:///{tmp_path / 'pos.db'}", pool_size=3, pool_timeout=30)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
async def catalog(database):
    """
    Two projects that both use a topping group literally named "G1".

    cafe:   Latte (G1) -> Oat milk, Caramel; Espresso (no group); Cookie (G2, no toppings)
    bakery: Bagel (G1) -> Cream cheese
    """
    async with database.session() as session:
        async with session.begin():
            cafe = Project(project_id=1, project_name="cafe")
            bakery = Project(project_id=2, project_name="bakery")
            empty = Project(project_id=3, project_name="empty")
            session.add_all([cafe, bakery, empty])
            await session.flush()

            session.add_all([
                Product(id=7, project_id=1, product_name="Latte", product_price=Decimal("4.50"),
                        topping_group="G1", topping_limit=2),
                Product(id=8, project_id=1, product_name="Espresso", product_price=Decimal("3.00"),
                        topping_group=None, topping_limit=0),
                Product(id=9, project_id=1, product_name="Cookie", product_price=Decimal("2.25"),
                        topping_group="G2", topping_limit=1),
                Product(id=20, project_id=2, product_name="Bagel", product_price=Decimal("3.75"),
                        topping_group="G1", topping_limit=1),
            ])
            session.add_all([
                Topping(topping_id=3, project_id=1, topping_group="G1", topping_name="Oat milk",
                        topping_price=Decimal("0.50")),
                Topping(topping_id=4, project_id=1, topping_group="G1", topping_name="Caramel",
                        topping_price=Decimal("0.75")),
                Topping(topping_id=5, project_id=2, topping_group="G1", topping_name="Cream cheese",
                        topping_price=Decimal("1.00")),
            ])
    return database


@pytest.fixture
async def client(catalog):
    app = create_app(database=catalog)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
