from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class CourseRevenue(BaseModel):
    course_id: int
    title: str
    sales: int
    revenue: float
    platform_fee: float
    earnings: float


class Sale(BaseModel):
    payment_id: int
    course_id: int
    course_title: str
    amount: float
    platform_fee: float
    earnings: float
    created_at: datetime


class RevenueReport(BaseModel):
    total_revenue: float
    total_platform_fee: float
    total_earnings: float
    total_sales: int
    courses: List[CourseRevenue] = Field(default_factory=list)
    recent_sales: List[Sale] = Field(default_factory=list)
