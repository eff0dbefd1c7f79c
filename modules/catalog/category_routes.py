from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from db.session import get_db
from utils.bounds import INT_MAX
from modules.catalog.category_schema import CategoryOut, SubcategoryOut
from modules.catalog.category_service import (
    get_category_by_id,
    get_all_categories,
    get_subcategories,
)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/", response_model=List[CategoryOut])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await get_all_categories(db)


@router.get("/{category_id}", response_model=CategoryOut)
async def get_category(category_id: int = Path(..., ge=1, le=INT_MAX), db: AsyncSession = Depends(get_db)):
    db_category = await get_category_by_id(category_id, db)
    if not db_category:
        raise HTTPException(status_code=404, detail="Category not found")
    return db_category


@router.get("/{category_id}/subcategories", response_model=List[SubcategoryOut])
async def list_subcategories(category_id: int = Path(..., ge=1, le=INT_MAX), db: AsyncSession = Depends(get_db)):
    db_category = await get_category_by_id(category_id, db)
    if not db_category:
        raise HTTPException(status_code=404, detail="Category not found")
    return await get_subcategories(category_id, db)
