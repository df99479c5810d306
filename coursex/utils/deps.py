from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from coursex.core.config import settings
from coursex.core.constants import RoleEnum
from coursex.core.database import SessionLocal
from coursex.core.exceptions import ForbiddenError, UnauthorizedError
from coursex.core.security import decode_identity_token
from coursex.models.user import User
from coursex.services.payment_gateway import MockPaymentGateway, PaymentGateway, StripePaymentGateway
from coursex.services.user import user_service

http_bearer = HTTPBearer(auto_error=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_transactional_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def get_current_user(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer)
) -> User:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")

    claims = decode_identity_token(credentials.credentials)
    return user_service.sync_from_identity(db, claims)

def require_role(*roles: RoleEnum):
    """Dependency that rejects callers whose mirrored role is not one of ``roles``."""
    def _verify_role(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise ForbiddenError("You do not have permission to perform this action.")
        return current_user
    return _verify_role

def get_payment_gateway() -> PaymentGateway:
    if settings.STRIPE_SECRET_KEY:
        return StripePaymentGateway(settings.STRIPE_SECRET_KEY)
    return MockPaymentGateway()
