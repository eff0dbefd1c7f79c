"""
Cart service: per-user line items guarded by the catalog.

Every operation takes the caller's ``AuthenticatedUser`` explicitly. Adding
re-reads the product from the catalog, rejects unknown and sold-out products
and refuses duplicates; the ``(user_id, product_id)`` unique constraint is
the final arbiter when two adds race. Stock is checked here, never reserved.
"""
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from db.models.cart import CartItem
from modules.auth.schema import AuthenticatedUser
from modules.catalog import service as catalog_service
from utils.log import get_logger
from .errors import (
    AlreadyInCart,
    CartItemNotFound,
    InvalidQuantity,
    NotAuthenticated,
    OutOfStock,
    ProductNotFound,
)
from .schema import CartItemDetailOut, CartSummaryOut

logger = get_logger("cart_service")

UNIQUE_LINE_CONSTRAINT = "uq_cart_items_user_product"
PRODUCT_FK_CONSTRAINT = "fk_cart_items_product_id"


def _require_user(user: Optional[AuthenticatedUser]) -> AuthenticatedUser:
    if user is None:
        raise NotAuthenticated()
    return user


async def _find_cart_item(user_id: int, product_id: int, db: AsyncSession) -> Optional[CartItem]:
    result = await db.execute(
        select(CartItem).where(
            CartItem.user_id == user_id,
            CartItem.product_id == product_id,
        )
    )
    return result.scalar_one_or_none()


def _classify_violation(error: IntegrityError) -> Optional[str]:
    """
    Name the cart constraint an insert tripped over.

    Returns "duplicate" for the one-line-per-product rule, "product" for the
    product foreign key and None for anything else. Postgres reports the
    constraint name; SQLite only lists the offending columns.
    """
    constraint = getattr(getattr(error.orig, "diag", None), "constraint_name", None)
    message = str(error.orig)
    if constraint == UNIQUE_LINE_CONSTRAINT or UNIQUE_LINE_CONSTRAINT in message:
        return "duplicate"
    if "UNIQUE constraint failed: cart_items.user_id, cart_items.product_id" in message:
        return "duplicate"
    if constraint == PRODUCT_FK_CONSTRAINT or PRODUCT_FK_CONSTRAINT in message:
        return "product"
    if "FOREIGN KEY constraint failed" in message:
        return "product"
    return None


async def add_to_cart(
    user: Optional[AuthenticatedUser],
    product_id: int,
    db: AsyncSession,
    quantity: int = 1,
) -> CartItem:
    user = _require_user(user)
    if quantity < 1:
        raise InvalidQuantity()

    product = await catalog_service.get_product(product_id, db)
    if product is None:
        logger.warning(f"User {user.id} tried to add unknown product {product_id}")
        raise ProductNotFound()
    if product.stock_quantity <= 0:
        logger.warning(f"User {user.id} tried to add out-of-stock product {product_id}")
        raise OutOfStock()
    if await _find_cart_item(user.id, product_id, db) is not None:
        logger.warning(f"Product {product_id} already in cart of user {user.id}")
        raise AlreadyInCart()

    db_item = CartItem(user_id=user.id, product_id=product_id, quantity=quantity)
    db.add(db_item)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        violation = _classify_violation(e)
        if violation == "duplicate":
            # Lost the race against a concurrent add of the same product.
            logger.warning(f"Concurrent add of product {product_id} for user {user.id} rejected")
            raise AlreadyInCart()
        if violation == "product":
            logger.warning(f"Product {product_id} disappeared before it reached the cart of user {user.id}")
            raise ProductNotFound()
        raise
    await db.refresh(db_item)
    logger.info(f"Added product {product_id} x{quantity} to cart of user {user.id}")
    return db_item


async def get_cart_items(user: Optional[AuthenticatedUser], db: AsyncSession) -> List[CartItem]:
    user = _require_user(user)
    result = await db.execute(
        select(CartItem)
        .options(selectinload(CartItem.product))
        .where(CartItem.user_id == user.id)
        .order_by(CartItem.id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().all()


async def remove_from_cart(
    user: Optional[AuthenticatedUser], product_id: int, db: AsyncSession
) -> None:
    user = _require_user(user)
    result = await db.execute(
        delete(CartItem).where(
            CartItem.user_id == user.id,
            CartItem.product_id == product_id,
        )
    )
    if result.rowcount == 0:
        await db.rollback()
        raise CartItemNotFound()
    await db.commit()
    logger.info(f"Removed product {product_id} from cart of user {user.id}")


async def clear_cart(user: Optional[AuthenticatedUser], db: AsyncSession) -> int:
    user = _require_user(user)
    result = await db.execute(delete(CartItem).where(CartItem.user_id == user.id))
    await db.commit()
    logger.info(f"Cleared {result.rowcount} item(s) from cart of user {user.id}")
    return result.rowcount


async def get_cart_summary(user: Optional[AuthenticatedUser], db: AsyncSession) -> CartSummaryOut:
    user = _require_user(user)
    items = await get_cart_items(user, db)
    total_price = sum(
        (Decimal(item.product.price) * item.quantity for item in items), Decimal("0")
    )
    return CartSummaryOut(
        user_id=user.id,
        items=[CartItemDetailOut.model_validate(item) for item in items],
        total_items=len(items),
        total_quantity=sum(item.quantity for item in items),
        total_price=total_price.quantize(Decimal("0.01")),
    )
