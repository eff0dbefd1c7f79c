from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from db.models.category import Category, Subcategory


async def get_category_by_id(category_id: int, db: AsyncSession):
    result = await db.execute(select(Category).where(Category.id == category_id))
    return result.scalar_one_or_none()


async def get_all_categories(db: AsyncSession):
    result = await db.execute(select(Category).order_by(Category.id))
    return result.scalars().all()


async def get_subcategories(category_id: int, db: AsyncSession):
    result = await db.execute(
        select(Subcategory)
        .where(Subcategory.category_id == category_id)
        .order_by(Subcategory.id)
    )
    return result.scalars().all()
