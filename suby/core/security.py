"""Password hashing (bcrypt) and vendor access tokens (JWT)."""


from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from suby.core.config import settings
from suby.core.exceptions import UnauthorizedError


def _secret(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_secret(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(vendor_id: str, expires_minutes: int | None = None) -> str:
    """Issue a signed token identifying *vendor_id*."""
    now = datetime.now(timezone.utc)
    ttl = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    payload = {"sub": vendor_id, "iat": now, "exp": now + ttl}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """Return the vendor id carried by *token*.

    Raises :class:`UnauthorizedError` for expired, tampered or malformed tokens.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token")
    return payload["sub"]
