from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursex.core.constants import RoleEnum
from coursex.schemas.admin import AdminStats
from coursex.schemas.response import APIResponse
from coursex.schemas.user import RoleUpdate, User as UserSchema
from coursex.services.admin import admin_service
from coursex.services.user import user_service
from coursex.utils import deps

router = APIRouter()


@router.get("/stats", response_model=APIResponse[AdminStats], dependencies=[Depends(deps.require_role(RoleEnum.ADMIN))])
def get_platform_stats(db: Session = Depends(deps.get_db)):
    stats = admin_service.get_stats(db)
    return APIResponse(message="Platform statistics retrieved successfully", data=stats)


@router.put("/users/{user_id}/role", response_model=APIResponse[UserSchema], dependencies=[Depends(deps.require_role(RoleEnum.ADMIN))])
def update_user_role(
    *,
    user_id: str,
    role_in: RoleUpdate,
    db: Session = Depends(deps.get_transactional_db)
):
    user = user_service.set_role(db, user_id=user_id, role=role_in.role)
    return APIResponse(message="User role updated successfully", data=user)
