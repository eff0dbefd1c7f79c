from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from db.models.product import Product
from typing import List, Optional


async def get_product(product_id: int, db: AsyncSession) -> Optional[Product]:
    """Catalog lookup used by the cart: always reads the current row."""
    result = await db.execute(
        select(Product).where(Product.id == product_id).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_products_by_subcategory(
    subcategory_id: int, db: AsyncSession
) -> List[Product]:
    stmt = (
        select(Product)
        .where(Product.subcategory_id == subcategory_id)
        .order_by(Product.id)
    )
    result = await db.execute(stmt)
    return result.scalars().all()
