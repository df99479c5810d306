from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from coursex.models.user import User
from coursex.schemas.response import APIResponse
from coursex.schemas.review import Review as ReviewSchema, ReviewCreate
from coursex.services.review import review_service
from coursex.utils import deps

router = APIRouter()


@router.get("", response_model=APIResponse[List[ReviewSchema]])
def list_reviews(
    *,
    db: Session = Depends(deps.get_db),
    course_id: Optional[int] = None,
    user_id: Optional[str] = None
):
    reviews = review_service.list_reviews(db, course_id=course_id, user_id=user_id)
    return APIResponse(message="Reviews retrieved successfully", data=reviews)


@router.post("", response_model=APIResponse[ReviewSchema], status_code=status.HTTP_201_CREATED)
def create_review(
    *,
    db: Session = Depends(deps.get_transactional_db),
    review_in: ReviewCreate,
    current_user: User = Depends(deps.get_current_user)
):
    review = review_service.create_review(db, review_in=review_in, current_user=current_user)
    return APIResponse(message="Review submitted successfully", data=review)
