"""
Admin authentication primitives.

Password and refresh-token hashing with passlib, JWT issuing and decoding with
python-jose, and the ``get_current_admin`` dependency guarding dashboard
endpoints.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database import get_session
from pinknail.core.database.entities.admins import Admin
from pinknail.core.database.repositories import AdminRepository
from pinknail.core.exceptions import UnauthorizedError
from pinknail.core.logging_config import get_logger

from .config import settings
from .constant import API_V1_STR

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_V1_STR}/auth/login", auto_error=False)


def hash_secret(secret: str) -> str:
    return pwd_context.hash(secret)


def verify_secret(plain: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)


def create_token(admin: Admin, token_type: str, expires_delta: timedelta) -> str:
    """
    Issue a signed JWT for an admin.

    Args:
        admin: Token subject
        token_type: ``access`` or ``refresh``
        expires_delta: Lifetime of the token

    Returns:
        Encoded JWT
    """
    jwt_config = settings.jwt
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(admin.id),
        "email": admin.email,
        "type": token_type,
        "iat": now,
        "exp": now + expires_delta,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(claims, jwt_config.secret, algorithm=jwt_config.algorithm)


def create_token_pair(admin: Admin, remember_me: bool = False) -> tuple[str, str]:
    """Issue an access token and a refresh token; both last longer with ``remember_me``."""
    jwt_config = settings.jwt
    if remember_me:
        access_ttl = refresh_ttl = timedelta(days=jwt_config.remember_me_expiry_days)
    else:
        access_ttl = timedelta(minutes=jwt_config.access_expiry_minutes)
        refresh_ttl = timedelta(days=jwt_config.refresh_expiry_days)
    return (
        create_token(admin, ACCESS_TOKEN_TYPE, access_ttl),
        create_token(admin, REFRESH_TOKEN_TYPE, refresh_ttl),
    )


def decode_token(token: str, expected_type: str) -> Dict[str, Any]:
    """
    Decode and verify a JWT.

    Args:
        token: Encoded JWT
        expected_type: Required value of the ``type`` claim

    Returns:
        The token claims

    Raises:
        UnauthorizedError: If the signature, expiry, subject or type is invalid
    """
    jwt_config = settings.jwt
    try:
        payload = jwt.decode(token, jwt_config.secret, algorithms=[jwt_config.algorithm])
    except JWTError as e:
        logger.debug(f"Rejected {expected_type} token: {e}")
        raise UnauthorizedError("Invalid or expired token") from e

    if payload.get("type") != expected_type or not str(payload.get("sub", "")).isdigit():
        raise UnauthorizedError("Invalid or expired token")
    return payload


async def get_current_admin(
    token: Optional[str] = Depends(oauth2_scheme),
    session: AsyncSession = Depends(get_session),
) -> Admin:
    """
    Resolve the admin behind the bearer access token.

    Raises:
        HTTPException: 401 when the token is missing, invalid, or belongs to an
            unknown or deactivated admin
    """
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise credentials_error

    try:
        payload = decode_token(token, ACCESS_TOKEN_TYPE)
    except UnauthorizedError:
        raise credentials_error

    admin = await AdminRepository(session).get_by_id(int(payload["sub"]))
    if admin is None or not admin.is_active:
        raise credentials_error
    return admin


CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
