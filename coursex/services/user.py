import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursex.core.config import settings
from coursex.core.constants import RoleEnum
from coursex.core.exceptions import NotFoundError, UnauthorizedError
from coursex.crud.user import user as crud_user
from coursex.models.user import User
from coursex.schemas.token import IdentityClaims
from coursex.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:

    def _is_admin_email(self, email: Optional[str]) -> bool:
        return bool(settings.ADMIN_EMAIL and email and email.lower() == settings.ADMIN_EMAIL.lower())

    def sync_from_identity(self, db: Session, claims: IdentityClaims) -> User:
        """Return the local mirror of an identity, creating or promoting it as needed."""
        user = crud_user.get(db, id=claims.sub)
        if user:
            if self._is_admin_email(user.email) and user.role != RoleEnum.ADMIN:
                user = crud_user.update(db, db_obj=user, obj_in={"role": RoleEnum.ADMIN})
                logger.info(f"Promoted {user.email} to ADMIN")
            return user

        if not claims.email:
            raise UnauthorizedError("Identity token has no email")

        existing = crud_user.get_by_email(db, email=claims.email)
        if existing:
            raise UnauthorizedError("Email is linked to a different identity")

        role = RoleEnum.ADMIN if self._is_admin_email(claims.email) else RoleEnum.STUDENT
        user_in = UserCreate(
            id=claims.sub,
            email=claims.email,
            name=claims.name,
            image=claims.picture,
            role=role
        )
        try:
            user = crud_user.create(db, obj_in=user_in, commit=True)
        except IntegrityError:
            # Another request mirrored the same identity first
            db.rollback()
            user = crud_user.get(db, id=claims.sub)
            if not user:
                raise UnauthorizedError("Email is linked to a different identity")
            return user

        logger.info(f"Mirrored new user {user.email} with role {role.value}")
        return user

    def set_role(self, db: Session, user_id: str, role: RoleEnum) -> User:
        user = crud_user.get(db, id=user_id)
        if not user:
            raise NotFoundError("User", user_id)
        user = crud_user.update(db, db_obj=user, obj_in={"role": role}, commit=False)
        logger.info(f"Role of {user.email} set to {role.value}")
        return user

    def make_admin(self, db: Session, email: str) -> User:
        user = crud_user.get_by_email(db, email=email)
        if not user:
            raise NotFoundError("User", email)
        return crud_user.update(db, db_obj=user, obj_in={"role": RoleEnum.ADMIN})

    def list_users(self, db: Session) -> List[User]:
        return crud_user.get_all_ordered(db)


user_service = UserService()
