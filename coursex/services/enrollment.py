import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursex.core.exceptions import (
    AlreadyEnrolledError,
    NotFoundError,
    PaymentRequiredError,
    ValidationError,
)
from coursex.crud.course import course as crud_course
from coursex.crud.enrollment import enrollment as crud_enrollment
from coursex.crud.payment import payment as crud_payment
from coursex.models.enrollment import Enrollment
from coursex.models.user import User
from coursex.schemas.enrollment import Certificate, Enrollment as EnrollmentSchema, EnrollmentCheck

logger = logging.getLogger(__name__)


class EnrollmentService:

    def insert_enrollment(self, db: Session, user_id: str, course_id: int) -> Enrollment:
        """Insert-if-absent on (student, course). A unique violation becomes AlreadyEnrolledError."""
        try:
            enrollment = crud_enrollment.create(
                db,
                obj_in={"student_id": user_id, "course_id": course_id, "progress": 0, "completed": False},
                commit=False
            )
        except IntegrityError:
            db.rollback()
            raise AlreadyEnrolledError()
        logger.info(f"User {user_id} enrolled in course {course_id}")
        return enrollment

    def enroll(self, db: Session, course_id: int, current_user: User) -> Enrollment:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise NotFoundError("Course", course_id)
        if not course.published:
            raise ValidationError("Course is not published")

        if crud_enrollment.get_by_user_and_course(db, user_id=current_user.id, course_id=course_id):
            raise AlreadyEnrolledError()

        if not course.is_free and not crud_payment.get_completed(db, user_id=current_user.id, course_id=course_id):
            raise PaymentRequiredError(course_id=course.id, price=course.price)

        enrollment = self.insert_enrollment(db, current_user.id, course_id)
        return crud_enrollment.get_by_user_and_course(db, user_id=current_user.id, course_id=enrollment.course_id)

    def list_enrollments(self, db: Session, current_user: User) -> List[Enrollment]:
        return crud_enrollment.get_by_user(db, user_id=current_user.id)

    def check_enrollment(self, db: Session, course_id: int, current_user: User) -> EnrollmentCheck:
        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=current_user.id, course_id=course_id)
        if not enrollment:
            return EnrollmentCheck(enrolled=False, enrollment=None)
        return EnrollmentCheck(enrolled=True, enrollment=EnrollmentSchema.model_validate(enrollment))

    def get_certificate(self, db: Session, course_slug: str, current_user: User) -> Certificate:
        course = crud_course.get_by_slug(db, slug=course_slug)
        if not course:
            raise NotFoundError("Course", course_slug)

        enrollment: Optional[Enrollment] = crud_enrollment.get_by_user_and_course(
            db, user_id=current_user.id, course_id=course.id
        )
        if not enrollment or not enrollment.completed:
            raise NotFoundError("Certificate", course_slug)

        return Certificate(
            student_name=current_user.name or current_user.email,
            course_title=course.title,
            course_slug=course.slug,
            instructor_name=course.instructor.name if course.instructor else None,
            completed_at=enrollment.updated_at or enrollment.created_at
        )


enrollment_service = EnrollmentService()
