from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursex.models.user import User
from coursex.schemas.lesson_progress import LessonComplete, LessonCompleteResult
from coursex.schemas.response import APIResponse
from coursex.services.course_progress import course_progress_service
from coursex.utils import deps

router = APIRouter()


@router.post("/complete", response_model=APIResponse[LessonCompleteResult])
def complete_lesson(
    *,
    db: Session = Depends(deps.get_transactional_db),
    lesson_in: LessonComplete,
    current_user: User = Depends(deps.get_current_user)
):
    result = course_progress_service.complete_lesson(
        db, lesson_id=lesson_in.lesson_id, course_id=lesson_in.course_id, current_user=current_user
    )
    return APIResponse(message="Lesson marked as completed", data=result)
