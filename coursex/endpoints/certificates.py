from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursex.models.user import User
from coursex.schemas.enrollment import Certificate
from coursex.schemas.response import APIResponse
from coursex.services.enrollment import enrollment_service
from coursex.utils import deps

router = APIRouter()


@router.get("/{course_slug}", response_model=APIResponse[Certificate])
def get_certificate(
    course_slug: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    certificate = enrollment_service.get_certificate(db, course_slug=course_slug, current_user=current_user)
    return APIResponse(message="Certificate retrieved successfully", data=certificate)
