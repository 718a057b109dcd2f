# core/security.py
import hmac
import hashlib
import os
from datetime import datetime, timedelta
from typing import Optional, Tuple

from fastapi import HTTPException, Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from starlette import status

from core.config import settings

ALGORITHM = "HS256"
SALT_SIZE = 128

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def create_password_hash(password: str) -> Tuple[bytes, bytes]:
    """
    Возвращает (hash, salt): HMAC-SHA512 пароля со случайным ключом.
    Ключ хранится рядом с хэшем как соль.
    """
    salt = os.urandom(SALT_SIZE)
    computed_hash = hmac.new(
        key=salt,
        msg=password.encode("utf-8"),
        digestmod=hashlib.sha512
    ).digest()
    return computed_hash, salt


def verify_password(password: str, password_hash: bytes, password_salt: bytes) -> bool:
    computed_hash = hmac.new(
        key=password_salt,
        msg=password.encode("utf-8"),
        digestmod=hashlib.sha512
    ).digest()
    return hmac.compare_digest(computed_hash, password_hash)


def create_access_token(user_id: int, username: str, expires_minutes: Optional[int] = None) -> str:
    if expires_minutes is None:
        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expires = datetime.utcnow() + timedelta(minutes=expires_minutes)
    token_payload = {
        "user_id": user_id,
        "unique_name": username,
        "exp": expires
    }
    return jwt.encode(token_payload, settings.TOKEN_SECRET, algorithm=ALGORITHM)


def decode_user_id(token: str) -> Optional[int]:
    """id пользователя из валидного непросроченного токена, иначе None."""
    try:
        payload = jwt.decode(token, settings.TOKEN_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
    user_id = payload.get("user_id")
    try:
        return int(user_id)
    except (TypeError, ValueError):
        return None


async def get_current_user_id(token: str = Depends(oauth2_scheme)) -> int:
    """Идентичность вызывающего из bearer-токена."""
    user_id = decode_user_id(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
