from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursex.core.exceptions import AlreadyReviewedError, ForbiddenError, NotFoundError
from coursex.crud.course import course as crud_course
from coursex.crud.enrollment import enrollment as crud_enrollment
from coursex.crud.review import review as crud_review
from coursex.models.review import Review
from coursex.models.user import User
from coursex.schemas.review import ReviewCreate


class ReviewService:

    def list_reviews(self, db: Session, course_id: Optional[int] = None, user_id: Optional[str] = None) -> List[Review]:
        if course_id is not None:
            return crud_review.get_by_course(db, course_id=course_id)
        if user_id is not None:
            return crud_review.get_by_user(db, user_id=user_id)
        return []

    def create_review(self, db: Session, review_in: ReviewCreate, current_user: User) -> Review:
        if not crud_course.get(db, id=review_in.course_id):
            raise NotFoundError("Course", review_in.course_id)

        if not crud_enrollment.get_by_user_and_course(db, user_id=current_user.id, course_id=review_in.course_id):
            raise ForbiddenError("You must be enrolled in this course to review it.")

        try:
            review = crud_review.create(
                db,
                obj_in={
                    "user_id": current_user.id,
                    "course_id": review_in.course_id,
                    "rating": review_in.rating,
                    "comment": review_in.comment,
                },
                commit=False
            )
        except IntegrityError:
            db.rollback()
            raise AlreadyReviewedError()
        return review


review_service = ReviewService()
