from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from coursex.crud.base import CRUDBase
from coursex.models.course import Course
from coursex.models.enrollment import Enrollment
from coursex.schemas.enrollment import EnrollmentCreate


class CRUDEnrollment(CRUDBase[Enrollment, EnrollmentCreate, EnrollmentCreate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Enrollment).options(
            selectinload(Enrollment.student),
            selectinload(Enrollment.course).selectinload(Course.instructor)
        )

    def get_by_user_and_course(self, db: Session, user_id: str, course_id: int) -> Optional[Enrollment]:
        return (
            self._query_with_relationships(db)
            .filter(Enrollment.student_id == user_id)
            .filter(Enrollment.course_id == course_id)
            .first()
        )

    def get_by_user(self, db: Session, user_id: str) -> List[Enrollment]:
        return (
            self._query_with_relationships(db)
            .filter(Enrollment.student_id == user_id)
            .order_by(Enrollment.created_at.desc(), Enrollment.id.desc())
            .all()
        )

    def count_for_instructor(self, db: Session, instructor_id: str) -> int:
        return (
            db.query(func.count(Enrollment.id))
            .join(Course, Course.id == Enrollment.course_id)
            .filter(Course.instructor_id == instructor_id)
            .scalar()
        ) or 0


enrollment = CRUDEnrollment(Enrollment)
