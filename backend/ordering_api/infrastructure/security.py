"""Credentials — password hashing (bcrypt) and access tokens (PyJWT).

Invariants:
    - Plain passwords are never stored or logged
    - Tokens are HS256-signed, carry sub (username), role, and exp
    - decode_access_token raises AuthenticationError for any invalid token

Design Decisions:
    - Mechanics delegated to bcrypt/PyJWT; this module only fixes the claims shape
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from ordering_api.core.errors import AuthenticationError


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(
    username: str, role: str, secret: str,
    algorithm: str = "HS256", expires_in: timedelta = timedelta(hours=24),
) -> str:
    """Issue a signed token for an authenticated user."""
    now = datetime.now(timezone.utc)
    claims = {"sub": username, "role": role, "iat": now, "exp": now + expires_in}
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict:
    """Verify signature and expiry; return the claims."""
    try:
        claims = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")
    return claims
