from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from coursex.core.constants import PaymentStatusEnum
from coursex.crud.base import CRUDBase
from coursex.models.course import Course
from coursex.models.payment import Payment
from coursex.schemas.payment import PaymentIntentCreate


class CRUDPayment(CRUDBase[Payment, PaymentIntentCreate, PaymentIntentCreate]):

    def _query_with_relationships(self, db: Session):
        return db.query(Payment).options(
            selectinload(Payment.course).selectinload(Course.instructor)
        )

    def get_by_intent_id(self, db: Session, payment_intent_id: str) -> Optional[Payment]:
        return db.query(Payment).filter(Payment.payment_intent_id == payment_intent_id).first()

    def get_completed(self, db: Session, user_id: str, course_id: int) -> Optional[Payment]:
        return (
            db.query(Payment)
            .filter(
                Payment.user_id == user_id,
                Payment.course_id == course_id,
                Payment.status == PaymentStatusEnum.COMPLETED
            )
            .first()
        )

    def get_pending(self, db: Session, user_id: str, course_id: int) -> Optional[Payment]:
        return (
            db.query(Payment)
            .filter(
                Payment.user_id == user_id,
                Payment.course_id == course_id,
                Payment.status == PaymentStatusEnum.PENDING
            )
            .order_by(Payment.created_at.desc(), Payment.id.desc())
            .first()
        )

    def get_by_user(self, db: Session, user_id: str) -> List[Payment]:
        return (
            self._query_with_relationships(db)
            .filter(Payment.user_id == user_id)
            .order_by(Payment.created_at.desc(), Payment.id.desc())
            .all()
        )

    def get_completed_for_instructor(self, db: Session, instructor_id: str) -> List[Payment]:
        return (
            db.query(Payment)
            .join(Course, Course.id == Payment.course_id)
            .options(selectinload(Payment.course))
            .filter(
                Course.instructor_id == instructor_id,
                Payment.status == PaymentStatusEnum.COMPLETED
            )
            .order_by(Payment.created_at.desc(), Payment.id.desc())
            .all()
        )

    def total_completed_amount(self, db: Session) -> float:
        total = (
            db.query(func.sum(Payment.amount))
            .filter(Payment.status == PaymentStatusEnum.COMPLETED)
            .scalar()
        )
        return float(total or 0)


payment = CRUDPayment(Payment)
