from pydantic import BaseModel, ConfigDict
from typing import Optional


class CategoryBase(BaseModel):
    name: str
    description: Optional[str] = None
    image: str


class CategoryOut(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class SubcategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: Optional[str] = None
    category_id: int
