from typing import List
from sqlalchemy.orm import Session, selectinload

from coursex.crud.base import CRUDBase
from coursex.models.course import Course
from coursex.models.wishlist import WishlistItem
from coursex.schemas.wishlist import WishlistItemCreate


class CRUDWishlist(CRUDBase[WishlistItem, WishlistItemCreate, WishlistItemCreate]):

    def get_by_user(self, db: Session, user_id: str) -> List[WishlistItem]:
        return (
            db.query(WishlistItem)
            .options(selectinload(WishlistItem.course).selectinload(Course.instructor))
            .filter(WishlistItem.user_id == user_id)
            .order_by(WishlistItem.created_at.desc(), WishlistItem.id.desc())
            .all()
        )

    def remove(self, db: Session, user_id: str, course_id: int) -> int:
        return (
            db.query(WishlistItem)
            .filter(WishlistItem.user_id == user_id, WishlistItem.course_id == course_id)
            .delete(synchronize_session=False)
        )


wishlist = CRUDWishlist(WishlistItem)
