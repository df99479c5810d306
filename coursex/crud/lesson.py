from typing import Optional
from sqlalchemy.orm import Session

from coursex.crud.base import CRUDBase
from coursex.models.lesson import Lesson, Resource
from coursex.schemas.lesson import LessonIn


class CRUDLesson(CRUDBase[Lesson, LessonIn, LessonIn]):

    def get_in_course(self, db: Session, lesson_id: int, course_id: int) -> Optional[Lesson]:
        return (
            db.query(Lesson)
            .filter(Lesson.id == lesson_id, Lesson.course_id == course_id)
            .first()
        )

    def count_by_course(self, db: Session, course_id: int) -> int:
        return db.query(Lesson).filter(Lesson.course_id == course_id).count()

    def build(self, course_id: int, lesson_in: LessonIn) -> Lesson:
        """Build an unsaved Lesson with its resources."""
        return Lesson(
            course_id=course_id,
            title=lesson_in.title,
            description=lesson_in.description,
            video_url=lesson_in.video_url,
            order=lesson_in.order or 1,
            resources=[Resource(url=url) for url in lesson_in.resources]
        )


lesson = CRUDLesson(Lesson)
