import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursex.core.exceptions import AlreadyWishlistedError, NotFoundError
from coursex.crud.course import course as crud_course
from coursex.crud.wishlist import wishlist as crud_wishlist
from coursex.models.user import User
from coursex.models.wishlist import WishlistItem

logger = logging.getLogger(__name__)


class WishlistService:

    def list_items(self, db: Session, current_user: User) -> List[WishlistItem]:
        return crud_wishlist.get_by_user(db, user_id=current_user.id)

    def add(self, db: Session, course_id: int, current_user: User) -> WishlistItem:
        if not crud_course.get(db, id=course_id):
            raise NotFoundError("Course", course_id)
        try:
            item = crud_wishlist.create(
                db, obj_in={"user_id": current_user.id, "course_id": course_id}, commit=False
            )
        except IntegrityError:
            db.rollback()
            raise AlreadyWishlistedError()
        return item

    def remove(self, db: Session, course_id: int, current_user: User) -> bool:
        removed = crud_wishlist.remove(db, user_id=current_user.id, course_id=course_id)
        if removed:
            logger.info(f"User {current_user.id} removed course {course_id} from wishlist")
        return True


wishlist_service = WishlistService()
