from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from coursex.models.user import User
from coursex.schemas.response import APIResponse
from coursex.schemas.wishlist import WishlistItem as WishlistItemSchema, WishlistItemCreate
from coursex.services.wishlist import wishlist_service
from coursex.utils import deps

router = APIRouter()


@router.get("", response_model=APIResponse[List[WishlistItemSchema]])
def get_wishlist(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    items = wishlist_service.list_items(db, current_user=current_user)
    return APIResponse(message="Wishlist retrieved successfully", data=items)


@router.post("", response_model=APIResponse[WishlistItemSchema], status_code=status.HTTP_201_CREATED)
def add_to_wishlist(
    *,
    db: Session = Depends(deps.get_transactional_db),
    item_in: WishlistItemCreate,
    current_user: User = Depends(deps.get_current_user)
):
    item = wishlist_service.add(db, course_id=item_in.course_id, current_user=current_user)
    return APIResponse(message="Course added to wishlist", data=item)


@router.delete("", response_model=APIResponse[dict])
def remove_from_wishlist(
    *,
    db: Session = Depends(deps.get_transactional_db),
    course_id: int = Query(...),
    current_user: User = Depends(deps.get_current_user)
):
    success = wishlist_service.remove(db, course_id=course_id, current_user=current_user)
    return APIResponse(message="Course removed from wishlist", data={"success": success})
