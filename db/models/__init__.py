# Importing the models registers every table on Base.metadata.
from db.models.category import Category, Subcategory
from db.models.product import Product
from db.models.cart import CartItem
from db.models.user import User

__all__ = ["Category", "Subcategory", "Product", "CartItem", "User"]
