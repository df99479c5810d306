import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from coursex.core.exceptions import NotFoundError
from coursex.crud.course import course as crud_course
from coursex.crud.enrollment import enrollment as crud_enrollment
from coursex.crud.lesson import lesson as crud_lesson
from coursex.models.course import Course
from coursex.models.lesson import Resource
from coursex.models.user import User
from coursex.schemas.course import CourseCreate, CourseUpdate, InstructorStats
from coursex.schemas.lesson import LessonIn
from coursex.utils.permission import PermissionHelper as permission_helper
from coursex.utils.slug import slugify, with_timestamp_suffix

logger = logging.getLogger(__name__)


class CourseService:

    def _get_or_raise(self, db: Session, course_id: int) -> Course:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise NotFoundError("Course", course_id)
        return course

    def _unique_slug(self, db: Session, title: str) -> str:
        slug = slugify(title)
        if crud_course.slug_exists(db, slug):
            slug = with_timestamp_suffix(slug)
        return slug

    def create_course(self, db: Session, course_in: CourseCreate, current_user: User) -> Course:
        permission_helper.require_instructor(current_user, "Only instructors can create courses.")

        course = Course(
            **course_in.model_dump(exclude={"lessons"}),
            slug=self._unique_slug(db, course_in.title),
            published=False,
            instructor_id=current_user.id
        )
        course.lessons = [crud_lesson.build(None, lesson_in) for lesson_in in course_in.lessons]
        db.add(course)
        db.flush()

        logger.info(f"Course {course.id} '{course.slug}' created by {current_user.id}")
        db.expire(course)
        return self._get_or_raise(db, course.id)

    def get_course(self, db: Session, course_id: int) -> Course:
        return self._get_or_raise(db, course_id)

    def get_course_by_slug(self, db: Session, slug: str) -> Course:
        course = crud_course.get_by_slug(db, slug=slug)
        if not course:
            raise NotFoundError("Course", slug)
        return course

    def list_catalog(
        self,
        db: Session,
        category: Optional[str] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Course]:
        return crud_course.get_published(db, category=category, search=search, skip=skip, limit=limit)

    def list_instructor_courses(self, db: Session, current_user: User) -> List[Course]:
        permission_helper.require_instructor(current_user)
        return crud_course.get_by_instructor(db, instructor_id=current_user.id)

    def _reconcile_lessons(self, db: Session, course: Course, lessons_in: List[LessonIn]):
        """Update lessons whose id is known, create the rest and delete the ones left out."""
        existing = {lesson.id: lesson for lesson in course.lessons}
        kept = []

        for lesson_in in lessons_in:
            lesson = existing.pop(lesson_in.id, None) if lesson_in.id is not None else None
            if lesson is None:
                kept.append(crud_lesson.build(course.id, lesson_in))
                continue
            lesson.title = lesson_in.title
            lesson.description = lesson_in.description
            lesson.video_url = lesson_in.video_url
            lesson.order = lesson_in.order or 1
            lesson.resources = [Resource(url=url) for url in lesson_in.resources]
            kept.append(lesson)

        kept_ids = {lesson.id for lesson in kept if lesson.id is not None}
        removed = [lesson for lesson_id, lesson in existing.items() if lesson_id not in kept_ids]

        # delete-orphan removes dropped lessons along with their progress rows
        course.lessons = kept
        db.flush()

        if removed:
            logger.info(f"Removed lessons {[lesson.id for lesson in removed]} from course {course.id}")

    def update_course(self, db: Session, course_id: int, course_in: CourseUpdate, current_user: User) -> Course:
        course = self._get_or_raise(db, course_id)
        permission_helper.require_course_management_permission(current_user, course)

        update_data = course_in.model_dump(exclude_unset=True, exclude={"lessons"})
        for field, value in update_data.items():
            setattr(course, field, value)

        if course_in.lessons is not None:
            self._reconcile_lessons(db, course, course_in.lessons)

        db.flush()
        logger.info(f"Course {course.id} updated by {current_user.id}")

        db.expire_all()
        return self._get_or_raise(db, course.id)

    def get_instructor_stats(self, db: Session, current_user: User) -> InstructorStats:
        permission_helper.require_instructor(current_user)
        courses = crud_course.get_by_instructor(db, instructor_id=current_user.id)

        # Unrated courses count as zero
        average_rating = round(sum(course.average_rating for course in courses) / len(courses), 2) if courses else 0.0

        return InstructorStats(
            total_courses=len(courses),
            published_courses=sum(1 for course in courses if course.published),
            total_enrollments=crud_enrollment.count_for_instructor(db, instructor_id=current_user.id),
            average_rating=average_rating
        )


course_service = CourseService()
