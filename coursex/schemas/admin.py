from pydantic import BaseModel


class AdminStats(BaseModel):
    total_users: int
    total_courses: int
    total_enrollments: int
    total_revenue: float
