from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from pydantic import ValidationError as PydanticValidationError

from coursex.core.config import settings
from coursex.core.exceptions import UnauthorizedError
from coursex.schemas.token import IdentityClaims


def decode_identity_token(token: str) -> IdentityClaims:
    options = {"verify_aud": settings.IDENTITY_TOKEN_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token,
            settings.IDENTITY_TOKEN_SECRET,
            algorithms=[settings.IDENTITY_TOKEN_ALGORITHM],
            audience=settings.IDENTITY_TOKEN_AUDIENCE,
            issuer=settings.IDENTITY_TOKEN_ISSUER,
            options=options,
        )
        return IdentityClaims(**payload)
    except JWTError:
        raise UnauthorizedError("Invalid token")
    except PydanticValidationError:
        raise UnauthorizedError("Invalid token payload")


def create_identity_token(
    subject: str,
    email: Optional[str] = None,
    name: Optional[str] = None,
    expires_delta: timedelta = timedelta(hours=1),
) -> str:
    """Mint a token in the identity provider's format. Used by local tooling and tests."""
    claims = {
        "sub": subject,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    if email:
        claims["email"] = email
    if name:
        claims["name"] = name
    if settings.IDENTITY_TOKEN_AUDIENCE:
        claims["aud"] = settings.IDENTITY_TOKEN_AUDIENCE
    if settings.IDENTITY_TOKEN_ISSUER:
        claims["iss"] = settings.IDENTITY_TOKEN_ISSUER
    return jwt.encode(claims, settings.IDENTITY_TOKEN_SECRET, algorithm=settings.IDENTITY_TOKEN_ALGORITHM)
