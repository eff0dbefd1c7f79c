import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from db.session import build_engine, create_tables, drop_tables


@pytest.mark.asyncio
async def test_drop_and_recreate_tables(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)

    dropped = await drop_tables(engine)
    assert {"cart_items", "products", "subcategories", "categories", "users"} <= set(dropped)
    # Dependents go first.
    assert dropped.index("cart_items") < dropped.index("products")

    await create_tables(engine)
    async with engine.connect() as conn:
        names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert "cart_items" in names and "users" in names

    await engine.dispose()


def test_sqlite_engine_skips_server_pool_options():
    engine = build_engine("sqlite+aiosqlite://")
    assert engine.url.get_backend_name() == "sqlite"
    assert engine.echo is False
