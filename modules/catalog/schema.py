
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from typing import Optional

class ProductBase(BaseModel):
    name: str
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    stock_quantity: int = Field(..., ge=0)
    image: str
    ar_model_path: Optional[str] = None
    rating: Optional[float] = None
    subcategory_id: int

    @field_validator("ar_model_path")
    @classmethod
    def blank_ar_model_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


class ProductOut(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int

    @computed_field
    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0

    @computed_field
    @property
    def has_ar_model(self) -> bool:
        return self.ar_model_path is not None


class ProductSummary(BaseModel):
    """Compact product view embedded in cart lines."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: Decimal
    stock_quantity: int
    image: str
