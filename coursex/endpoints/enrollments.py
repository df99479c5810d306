from typing import List, Optional, Union
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from coursex.models.user import User
from coursex.schemas.enrollment import Enrollment as EnrollmentSchema, EnrollmentCheck, EnrollmentCreate
from coursex.schemas.response import APIResponse
from coursex.services.enrollment import enrollment_service
from coursex.utils import deps

router = APIRouter()


@router.get("", response_model=APIResponse[Union[EnrollmentCheck, List[EnrollmentSchema]]])
def get_enrollments(
    *,
    db: Session = Depends(deps.get_db),
    course_id: Optional[int] = None,
    current_user: User = Depends(deps.get_current_user)
):
    if course_id is not None:
        check = enrollment_service.check_enrollment(db, course_id=course_id, current_user=current_user)
        return APIResponse(message="Enrollment status retrieved successfully", data=check)

    enrollments = enrollment_service.list_enrollments(db, current_user=current_user)
    return APIResponse(message="Enrollments retrieved successfully", data=enrollments)


@router.post("", response_model=APIResponse[EnrollmentSchema], status_code=status.HTTP_201_CREATED)
def enroll(
    *,
    db: Session = Depends(deps.get_transactional_db),
    enrollment_in: EnrollmentCreate,
    current_user: User = Depends(deps.get_current_user)
):
    enrollment = enrollment_service.enroll(db, course_id=enrollment_in.course_id, current_user=current_user)
    return APIResponse(message="Enrolled successfully", data=enrollment)
