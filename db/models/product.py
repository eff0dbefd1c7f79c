
from sqlalchemy import CheckConstraint, Column, Integer, String, Numeric, Float, Text, ForeignKey
from sqlalchemy.orm import relationship
from db.session import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    image = Column(String, nullable=False)
    ar_model_path = Column(String, nullable=True)
    rating = Column(Float, nullable=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), index=True, nullable=False)

    subcategory = relationship("Subcategory", back_populates="products")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
    )
