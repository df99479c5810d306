from fastapi import APIRouter, Depends

from coursex.models.user import User
from coursex.schemas.response import APIResponse
from coursex.schemas.user import User as UserSchema
from coursex.utils import deps

router = APIRouter()


@router.get("/me", response_model=APIResponse[UserSchema])
def get_me(current_user: User = Depends(deps.get_current_user)):
    return APIResponse(message="User retrieved successfully", data=current_user)
