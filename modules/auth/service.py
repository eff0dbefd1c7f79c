"""
Accounts and bearer tokens.

Passwords are stored as argon2 hashes. Tokens are HS256 JWTs signed with
``SECRET``; ``sub`` holds the numeric user id and ``exp`` the expiry.
Verification failures of any kind surface as ``NotAuthenticated`` so callers
never see library exceptions.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from config import JWT_ALGORITHM, JWT_LIFETIME_SECONDS, SECRET
from db.models.user import User
from modules.cart.errors import NotAuthenticated
from utils.log import get_logger
from .schema import AuthenticatedUser, UserCreate, UserLogin

logger = get_logger("auth_service")

password_hasher = PasswordHasher()


def _secret() -> str:
    if not SECRET:
        raise RuntimeError("SECRET is not set in the environment.")
    return SECRET


def create_access_token(user_id: int, lifetime_seconds: int = JWT_LIFETIME_SECONDS) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=lifetime_seconds),
    }
    return jwt.encode(payload, _secret(), algorithm=JWT_ALGORITHM)


def authenticate(token: str | None) -> AuthenticatedUser:
    if not token:
        raise NotAuthenticated()
    try:
        payload = jwt.decode(
            token,
            _secret(),
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired bearer token")
        raise NotAuthenticated("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected invalid bearer token: {e}")
        raise NotAuthenticated()

    try:
        return AuthenticatedUser(id=int(payload["sub"]))
    except (TypeError, ValueError):
        logger.info("Rejected bearer token with non-numeric subject")
        raise NotAuthenticated()


async def get_user_by_email(email: str, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def register_user(data: UserCreate, db: AsyncSession) -> Optional[User]:
    """Create an account; None when the email is already taken."""
    user = User(
        name=data.name,
        email=data.email.lower(),
        password_hash=password_hasher.hash(data.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(f"Registration for existing email {user.email} rejected")
        return None
    await db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


async def login_user(data: UserLogin, db: AsyncSession) -> User:
    user = await get_user_by_email(data.email, db)
    if user is None:
        logger.info("Login for unknown email rejected")
        raise NotAuthenticated("Invalid email or password")
    try:
        password_hasher.verify(user.password_hash, data.password)
    except (VerificationError, InvalidHashError):
        logger.info(f"Login with wrong password for user {user.id} rejected")
        raise NotAuthenticated("Invalid email or password")

    if password_hasher.check_needs_rehash(user.password_hash):
        user.password_hash = password_hasher.hash(data.password)
        await db.commit()
    logger.info(f"User {user.id} logged in")
    return user
