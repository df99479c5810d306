from typing import List, Optional
from sqlalchemy.orm import Session

from coursex.crud.base import CRUDBase
from coursex.models.user import User
from coursex.schemas.user import UserCreate, RoleUpdate


class CRUDUser(CRUDBase[User, UserCreate, RoleUpdate]):
    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def get_all_ordered(self, db: Session) -> List[User]:
        return db.query(User).order_by(User.created_at, User.email).all()


user = CRUDUser(User)
