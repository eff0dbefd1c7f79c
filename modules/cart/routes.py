
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from . import service, schema
from .errors import CartError, NotAuthenticated
from db.session import get_db
from utils.bounds import INT_MAX
from modules.auth.dependencies import get_current_user
from modules.auth.schema import AuthenticatedUser

router = APIRouter(prefix="/cart", tags=["cart"])


def _to_http(error: CartError) -> HTTPException:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, NotAuthenticated) else None
    return HTTPException(status_code=error.status_code, detail=error.detail, headers=headers)


def _own_cart(user_id: int, user: AuthenticatedUser) -> None:
    # A token only ever opens its own cart.
    if user_id != user.id:
        raise _to_http(NotAuthenticated())


@router.post("/add", response_model=schema.CartItemOut, status_code=status.HTTP_201_CREATED)
async def add_item(
    item: schema.CartItemCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await service.add_to_cart(user, item.product_id, db, quantity=item.quantity)
    except CartError as e:
        raise _to_http(e)


@router.delete("/remove/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(
    product_id: int = Path(..., ge=1, le=INT_MAX),
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        await service.remove_from_cart(user, product_id, db)
    except CartError as e:
        raise _to_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/clear", response_model=schema.CartClearOut)
async def clear_items(
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    removed = await service.clear_cart(user, db)
    return {"removed": removed}


@router.get("/{user_id}", response_model=list[schema.CartItemDetailOut])
async def get_cart(
    user_id: int = Path(..., ge=1, le=INT_MAX),
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    _own_cart(user_id, user)
    return await service.get_cart_items(user, db)


@router.get("/{user_id}/summary", response_model=schema.CartSummaryOut)
async def get_cart_summary(
    user_id: int = Path(..., ge=1, le=INT_MAX),
    user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    _own_cart(user_id, user)
    return await service.get_cart_summary(user, db)
