from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from coursex.core.constants import RoleEnum
from coursex.models.user import User
from coursex.schemas.course import (
    Course as CourseSchema,
    CourseCreate,
    CourseListItem,
    CourseProgress,
    CourseUpdate,
)
from coursex.schemas.response import APIResponse
from coursex.services.course import course_service
from coursex.services.course_progress import course_progress_service
from coursex.utils import deps

router = APIRouter()


@router.get("", response_model=APIResponse[List[CourseListItem]])
def list_catalog(
    *,
    db: Session = Depends(deps.get_db),
    category: Optional[str] = None,
    search: Optional[str] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100)
):
    courses = course_service.list_catalog(db, category=category, search=search, skip=skip, limit=limit)
    return APIResponse(message="Courses retrieved successfully", data=courses)


@router.post("", response_model=APIResponse[CourseSchema], status_code=status.HTTP_201_CREATED)
def create_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_in: CourseCreate,
    current_user: User = Depends(deps.require_role(RoleEnum.INSTRUCTOR))
):
    course = course_service.create_course(db, course_in=course_in, current_user=current_user)
    return APIResponse(message="Course created successfully", data=course)


@router.get("/mine", response_model=APIResponse[List[CourseListItem]])
def list_my_courses(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.require_role(RoleEnum.INSTRUCTOR))
):
    courses = course_service.list_instructor_courses(db, current_user=current_user)
    return APIResponse(message="Courses retrieved successfully", data=courses)


@router.get("/slug/{slug}", response_model=APIResponse[CourseSchema])
def get_course_by_slug(slug: str, db: Session = Depends(deps.get_db)):
    course = course_service.get_course_by_slug(db, slug=slug)
    return APIResponse(message="Course retrieved successfully", data=course)


@router.get("/{course_id}", response_model=APIResponse[CourseSchema])
def get_course(course_id: int, db: Session = Depends(deps.get_db)):
    course = course_service.get_course(db, course_id=course_id)
    return APIResponse(message="Course retrieved successfully", data=course)


@router.put("/{course_id}", response_model=APIResponse[CourseSchema])
def update_course(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int,
    course_in: CourseUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    course = course_service.update_course(db, course_id=course_id, course_in=course_in, current_user=current_user)
    return APIResponse(message="Course updated successfully", data=course)


@router.get("/{course_id}/progress", response_model=APIResponse[CourseProgress])
def get_course_progress(
    course_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    progress = course_progress_service.get_course_progress(db, course_id=course_id, current_user=current_user)
    return APIResponse(message="Course progress retrieved successfully", data=progress)
