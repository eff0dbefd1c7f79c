"""
Cart error taxonomy.

Every error is recoverable and user-actionable: services raise them, routes
turn them into HTTP responses carrying ``status_code`` and ``detail``.
"""
from fastapi import status


class CartError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Cart operation failed"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class NotAuthenticated(CartError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"


class ProductNotFound(CartError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Product not found"


class OutOfStock(CartError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Product is out of stock"


class AlreadyInCart(CartError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Product is already in cart"


class CartItemNotFound(CartError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Cart item not found"


class InvalidQuantity(CartError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    detail = "Quantity must be at least 1"
