import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursex.core.exceptions import ForbiddenError, NotFoundError
from coursex.crud.course import course as crud_course
from coursex.crud.enrollment import enrollment as crud_enrollment
from coursex.crud.lesson import lesson as crud_lesson
from coursex.crud.lesson_progress import lesson_progress as crud_lesson_progress
from coursex.models.enrollment import Enrollment
from coursex.models.user import User
from coursex.schemas.course import CourseProgress
from coursex.schemas.lesson_progress import LessonCompleteResult

logger = logging.getLogger(__name__)


def calculate_progress(completed: int, total: int) -> int:
    """Whole percent of lessons completed, rounding halves up. Zero lessons means zero progress."""
    if total <= 0:
        return 0
    completed = min(completed, total)
    return (200 * completed + total) // (2 * total)


class CourseProgressService:

    def _get_or_raise_enrollment(self, db: Session, user_id: str, course_id: int) -> Enrollment:
        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user_id, course_id=course_id)
        if not enrollment:
            raise ForbiddenError("You are not enrolled in this course.")
        return enrollment

    def _update_course_progress(self, db: Session, enrollment: Enrollment):
        total = crud_lesson.count_by_course(db, course_id=enrollment.course_id)
        completed = crud_lesson_progress.count_completed(
            db, user_id=enrollment.student_id, course_id=enrollment.course_id
        )
        progress = calculate_progress(completed, total)
        was_completed = enrollment.completed

        enrollment.progress = progress
        enrollment.completed = progress >= 100
        db.add(enrollment)
        db.flush()

        if enrollment.completed and not was_completed:
            logger.info(f"User {enrollment.student_id} completed course {enrollment.course_id}")

    def _insert_lesson_progress(self, db: Session, user_id: str, lesson_id: int):
        """Insert-if-absent on (user, lesson). Losing a race to an identical insert is not an error."""
        try:
            crud_lesson_progress.create(
                db,
                obj_in={
                    "user_id": user_id,
                    "lesson_id": lesson_id,
                    "completed": True,
                    "completed_at": datetime.now(timezone.utc),
                },
                commit=False
            )
        except IntegrityError:
            # Nothing was written before the insert, so rolling back loses no work
            db.rollback()
            logger.info(f"Lesson {lesson_id} already recorded as completed for {user_id}")

    def complete_lesson(self, db: Session, lesson_id: int, course_id: int, current_user: User) -> LessonCompleteResult:
        enrollment = self._get_or_raise_enrollment(db, current_user.id, course_id)

        lesson = crud_lesson.get_in_course(db, lesson_id=lesson_id, course_id=course_id)
        if not lesson:
            raise NotFoundError("Lesson", lesson_id)

        lesson_progress = crud_lesson_progress.get_by_user_and_lesson(
            db, user_id=current_user.id, lesson_id=lesson_id
        )
        if not lesson_progress:
            self._insert_lesson_progress(db, current_user.id, lesson_id)
        elif not lesson_progress.completed:
            lesson_progress.completed = True
            lesson_progress.completed_at = datetime.now(timezone.utc)
            db.add(lesson_progress)
            db.flush()

        self._update_course_progress(db, enrollment)
        return LessonCompleteResult(success=True, progress=enrollment.progress, completed=enrollment.completed)

    def get_course_progress(self, db: Session, course_id: int, current_user: User) -> CourseProgress:
        if not crud_course.get(db, id=course_id):
            raise NotFoundError("Course", course_id)

        enrollment = self._get_or_raise_enrollment(db, current_user.id, course_id)
        return CourseProgress(
            course_id=course_id,
            progress=enrollment.progress,
            completed=enrollment.completed,
            completed_lesson_ids=crud_lesson_progress.get_completed_lesson_ids(
                db, user_id=current_user.id, course_id=course_id
            )
        )


course_progress_service = CourseProgressService()
