from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from modules.cart.errors import NotAuthenticated
from .schema import TokenOut, UserCreate, UserLogin
from .service import create_access_token, get_user_by_email, login_user, register_user

router = APIRouter(prefix="/auth", tags=["Auth"])


def _token_for(user) -> TokenOut:
    return TokenOut(token=create_access_token(user.id), user_id=user.id, name=user.name)


@router.post("/register", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, db: AsyncSession = Depends(get_db)):
    if await get_user_by_email(data.email, db):
        raise HTTPException(status_code=400, detail="Email already registered")
    user = await register_user(data, db)
    if not user:
        raise HTTPException(status_code=400, detail="Email already registered")
    return _token_for(user)


@router.post("/login", response_model=TokenOut)
async def login(data: UserLogin, db: AsyncSession = Depends(get_db)):
    try:
        user = await login_user(data, db)
    except NotAuthenticated as e:
        raise HTTPException(
            status_code=e.status_code,
            detail=e.detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _token_for(user)
