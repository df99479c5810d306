from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from coursex.crud.base import CRUDBase
from coursex.models.course import Course
from coursex.models.lesson import Lesson
from coursex.schemas.course import CourseCreate, CourseUpdate


class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Course).options(
            selectinload(Course.instructor),
            selectinload(Course.lessons).selectinload(Lesson.resources),
            selectinload(Course.reviews)
        )

    def get(self, db: Session, id: int) -> Optional[Course]:
        return self._query_with_relationships(db).filter(Course.id == id).first()

    def get_by_slug(self, db: Session, slug: str) -> Optional[Course]:
        return self._query_with_relationships(db).filter(Course.slug == slug).first()

    def slug_exists(self, db: Session, slug: str) -> bool:
        return db.query(Course.id).filter(Course.slug == slug).first() is not None

    def get_published(
        self,
        db: Session,
        *,
        category: Optional[str] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Course]:
        query = self._query_with_relationships(db).filter(Course.published.is_(True))
        if category:
            query = query.filter(Course.category == category)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Course.title.ilike(pattern), Course.description.ilike(pattern)))
        return (
            query.order_by(Course.created_at.desc(), Course.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_instructor(self, db: Session, instructor_id: str) -> List[Course]:
        return (
            self._query_with_relationships(db)
            .filter(Course.instructor_id == instructor_id)
            .order_by(Course.created_at.desc(), Course.id.desc())
            .all()
        )


course = CRUDCourse(Course)
