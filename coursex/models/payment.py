from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Enum, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from coursex.core.database import Base
from coursex.core.constants import PaymentStatusEnum

class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    # Course price captured when the intent was created
    amount = Column(Float, nullable=False)
    currency = Column(String, nullable=False, default="usd")
    status = Column(
        Enum(PaymentStatusEnum, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PaymentStatusEnum.PENDING
    )
    payment_intent_id = Column(String, unique=True, index=True, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        Index(
            "uq_payments_completed_user_course",
            "user_id",
            "course_id",
            unique=True,
            postgresql_where=text("status = 'completed'"),
            sqlite_where=text("status = 'completed'"),
        ),
    )

    user = relationship("User", back_populates="payments")
    course = relationship("Course", back_populates="payments")
