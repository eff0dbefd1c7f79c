import sys
import os
import asyncio

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from db.session import async_engine, drop_tables


async def drop():
    for name in await drop_tables():
        print(f"Dropped table: {name}")
    await async_engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop())
