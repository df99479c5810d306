from typing import List
from sqlalchemy.orm import Session, selectinload

from coursex.crud.base import CRUDBase
from coursex.models.review import Review
from coursex.schemas.review import ReviewCreate


class CRUDReview(CRUDBase[Review, ReviewCreate, ReviewCreate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Review).options(selectinload(Review.user))

    def get_by_course(self, db: Session, course_id: int) -> List[Review]:
        return (
            self._query_with_relationships(db)
            .filter(Review.course_id == course_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
            .all()
        )

    def get_by_user(self, db: Session, user_id: str) -> List[Review]:
        return (
            self._query_with_relationships(db)
            .filter(Review.user_id == user_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
            .all()
        )


review = CRUDReview(Review)
