from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from coursex.core.constants import PaymentStatusEnum
from coursex.schemas.course import CourseSummary


class PaymentIntentCreate(BaseModel):
    course_id: int


class PaymentIntentResult(BaseModel):
    client_secret: Optional[str] = None
    payment_intent_id: str
    payment_id: int


class PaymentConfirm(BaseModel):
    payment_intent_id: str
    payment_id: int


class PaymentConfirmResult(BaseModel):
    success: bool
    payment_id: int
    course_id: int


class Payment(BaseModel):
    id: int
    course_id: int
    amount: float
    currency: str
    status: PaymentStatusEnum
    payment_intent_id: Optional[str] = None
    created_at: Optional[datetime] = None
    course: Optional[CourseSummary] = None

    model_config = ConfigDict(from_attributes=True)


class GatewayIntent(BaseModel):
    """What a payment gateway returns when an intent is created."""
    payment_intent_id: str
    client_secret: Optional[str] = None
