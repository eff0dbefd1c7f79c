
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession
from . import service, schema
from db.session import get_db
from utils.bounds import INT_MAX

router = APIRouter(prefix="/products", tags=["Products"])

@router.get("/products/{subcategory_id}", response_model=list[schema.ProductOut])
async def read_products_by_subcategory(subcategory_id: int = Path(..., ge=1, le=INT_MAX), db: AsyncSession = Depends(get_db)):
    return await service.get_products_by_subcategory(subcategory_id, db)

@router.get("/{product_id}", response_model=schema.ProductOut)
async def read_product(product_id: int = Path(..., ge=1, le=INT_MAX), db: AsyncSession = Depends(get_db)):
    db_product = await service.get_product(product_id, db)
    if not db_product:
        raise HTTPException(status_code=404, detail="Product not found")
    return db_product
