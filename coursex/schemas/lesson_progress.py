from pydantic import BaseModel


class LessonComplete(BaseModel):
    lesson_id: int
    course_id: int


class LessonCompleteResult(BaseModel):
    success: bool
    progress: int
    completed: bool
