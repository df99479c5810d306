from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from coursex.core.constants import EnrollmentStateEnum
from coursex.schemas.course import CourseSummary


class EnrollmentCreate(BaseModel):
    course_id: int


class Enrollment(BaseModel):
    id: int
    student_id: str
    course_id: int
    progress: int
    completed: bool
    state: EnrollmentStateEnum
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    course: Optional[CourseSummary] = None

    model_config = ConfigDict(from_attributes=True)


class EnrollmentCheck(BaseModel):
    enrolled: bool
    enrollment: Optional[Enrollment] = None


class Certificate(BaseModel):
    student_name: Optional[str] = None
    course_title: str
    course_slug: str
    instructor_name: Optional[str] = None
    completed_at: Optional[datetime] = None
