from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursex.core.constants import RoleEnum
from coursex.models.user import User
from coursex.schemas.course import InstructorStats
from coursex.schemas.response import APIResponse
from coursex.schemas.revenue import RevenueReport
from coursex.services.course import course_service
from coursex.services.revenue import revenue_service
from coursex.utils import deps

router = APIRouter()


@router.get("/stats", response_model=APIResponse[InstructorStats])
def get_instructor_stats(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.require_role(RoleEnum.INSTRUCTOR))
):
    stats = course_service.get_instructor_stats(db, current_user=current_user)
    return APIResponse(message="Instructor statistics retrieved successfully", data=stats)


@router.get("/revenue", response_model=APIResponse[RevenueReport])
def get_instructor_revenue(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.require_role(RoleEnum.INSTRUCTOR))
):
    report = revenue_service.get_instructor_revenue(db, current_user=current_user)
    return APIResponse(message="Revenue retrieved successfully", data=report)
