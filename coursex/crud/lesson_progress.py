from typing import List, Optional
from sqlalchemy.orm import Session

from coursex.crud.base import CRUDBase
from coursex.models.lesson import Lesson
from coursex.models.lesson_progress import LessonProgress
from coursex.schemas.lesson_progress import LessonComplete


class CRUDLessonProgress(CRUDBase[LessonProgress, LessonComplete, LessonComplete]):

    def get_by_user_and_lesson(self, db: Session, user_id: str, lesson_id: int) -> Optional[LessonProgress]:
        return (
            db.query(LessonProgress)
            .filter(LessonProgress.user_id == user_id, LessonProgress.lesson_id == lesson_id)
            .first()
        )

    def get_completed_lesson_ids(self, db: Session, user_id: str, course_id: int) -> List[int]:
        rows = (
            db.query(LessonProgress.lesson_id)
            .join(Lesson, Lesson.id == LessonProgress.lesson_id)
            .filter(
                LessonProgress.user_id == user_id,
                LessonProgress.completed.is_(True),
                Lesson.course_id == course_id
            )
            .order_by(Lesson.order, Lesson.id)
            .all()
        )
        return [row.lesson_id for row in rows]

    def count_completed(self, db: Session, user_id: str, course_id: int) -> int:
        return (
            db.query(LessonProgress)
            .join(Lesson, Lesson.id == LessonProgress.lesson_id)
            .filter(
                LessonProgress.user_id == user_id,
                LessonProgress.completed.is_(True),
                Lesson.course_id == course_id
            )
            .count()
        )


lesson_progress = CRUDLessonProgress(LessonProgress)
