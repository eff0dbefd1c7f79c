import sys
import os
import asyncio
from decimal import Decimal

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from db.session import async_engine, create_tables, get_db_session
from db.models import Category, Subcategory, Product

sample_categories = [
    Category(
        name="Living room",
        description="Sofas, armchairs and coffee tables",
        image="/uploads/categories/living-room.jpg",
        subcategories=[
            Subcategory(
                name="Sofas",
                image="/uploads/subcategories/sofas.jpg",
                products=[
                    Product(name="Oslo corner sofa", description="Three-seat corner sofa",
                            price=Decimal("289990.00"), stock_quantity=4, rating=4.8,
                            image="/uploads/products/oslo-sofa.jpg",
                            ar_model_path="/uploads/models/oslo-sofa.glb"),
                    Product(name="Bergen sofa bed", description="Fold-out sofa bed",
                            price=Decimal("199990.00"), stock_quantity=0, rating=4.5,
                            image="/uploads/products/bergen-sofa.jpg"),
                ],
            ),
            Subcategory(
                name="Coffee tables",
                image="/uploads/subcategories/coffee-tables.jpg",
                products=[
                    Product(name="Lund oak coffee table", description="Solid oak, 90x60 cm",
                            price=Decimal("45990.00"), stock_quantity=12, rating=4.6,
                            image="/uploads/products/lund-table.jpg",
                            ar_model_path="/uploads/models/lund-table.glb"),
                ],
            ),
        ],
    ),
    Category(
        name="Bedroom",
        description="Beds, wardrobes and nightstands",
        image="/uploads/categories/bedroom.jpg",
        subcategories=[
            Subcategory(
                name="Beds",
                image="/uploads/subcategories/beds.jpg",
                products=[
                    Product(name="Nord double bed", description="160x200 cm with storage",
                            price=Decimal("159990.00"), stock_quantity=6, rating=4.7,
                            image="/uploads/products/nord-bed.jpg"),
                ],
            ),
        ],
    ),
]

async def seed():
    await create_tables()
    async with get_db_session() as db:
        db.add_all(sample_categories)
        await db.commit()
        print("Sample catalog added.")
    await async_engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
