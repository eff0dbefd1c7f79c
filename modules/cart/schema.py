
from datetime import datetime
from decimal import Decimal
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional

from modules.catalog.schema import ProductSummary
from utils.bounds import INT_MAX

class CartItemCreate(BaseModel):
    """Body of ``POST /cart/add``; accepts the mobile client's camelCase keys."""
    product_id: int = Field(..., ge=1, le=INT_MAX, validation_alias=AliasChoices("productId", "product_id"))
    quantity: int = Field(1, ge=1, le=INT_MAX)

class CartItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    product_id: int
    quantity: int
    created_at: Optional[datetime] = None

class CartItemDetailOut(CartItemOut):
    product: ProductSummary

class CartSummaryOut(BaseModel):
    user_id: int
    items: List[CartItemDetailOut]
    total_items: int
    total_quantity: int
    total_price: Decimal

class CartClearOut(BaseModel):
    removed: int
