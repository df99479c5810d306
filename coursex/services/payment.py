import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursex.core.config import settings
from coursex.core.constants import PaymentStatusEnum
from coursex.core.exceptions import (
    AlreadyEnrolledError,
    AlreadyPurchasedError,
    CourseIsFreeError,
    NotFoundError,
    PaymentConfirmationFailedError,
    ValidationError,
)
from coursex.crud.course import course as crud_course
from coursex.crud.enrollment import enrollment as crud_enrollment
from coursex.crud.payment import payment as crud_payment
from coursex.models.payment import Payment
from coursex.models.user import User
from coursex.schemas.payment import PaymentConfirmResult, PaymentIntentResult
from coursex.services.enrollment import enrollment_service
from coursex.services.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class PaymentService:

    async def create_payment_intent(
        self, db: Session, course_id: int, current_user: User, gateway: PaymentGateway
    ) -> PaymentIntentResult:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise NotFoundError("Course", course_id)
        if crud_payment.get_completed(db, user_id=current_user.id, course_id=course_id):
            raise AlreadyPurchasedError()
        if course.is_free:
            raise CourseIsFreeError()

        # A retried checkout resumes the open intent instead of opening a second charge
        pending = crud_payment.get_pending(db, user_id=current_user.id, course_id=course_id)
        if pending and pending.amount == course.price:
            intent = await gateway.retrieve_intent(pending.payment_intent_id)
            logger.info(f"Payment {pending.id} resumed for course {course.id} by {current_user.id}")
            return PaymentIntentResult(
                client_secret=intent.client_secret,
                payment_intent_id=pending.payment_intent_id,
                payment_id=pending.id
            )

        # Price is captured here; later price edits do not touch this payment
        amount = course.price
        intent = await gateway.create_intent(amount, course, current_user)

        payment = crud_payment.create(
            db,
            obj_in={
                "user_id": current_user.id,
                "course_id": course.id,
                "amount": amount,
                "currency": settings.PAYMENT_CURRENCY,
                "status": PaymentStatusEnum.PENDING,
                "payment_intent_id": intent.payment_intent_id,
            },
            commit=False
        )
        logger.info(f"Payment {payment.id} pending for course {course.id} by {current_user.id}: {amount}")

        return PaymentIntentResult(
            client_secret=intent.client_secret,
            payment_intent_id=intent.payment_intent_id,
            payment_id=payment.id
        )

    def _ensure_not_purchased_elsewhere(self, db: Session, payment: Payment):
        completed = crud_payment.get_completed(db, user_id=payment.user_id, course_id=payment.course_id)
        if completed and completed.id != payment.id:
            logger.warning(
                f"Payment {payment.id} duplicates completed payment {completed.id} "
                f"for course {payment.course_id} by {payment.user_id}"
            )
            raise AlreadyPurchasedError()

    def _mark_completed(self, db: Session, payment: Payment):
        if payment.status == PaymentStatusEnum.COMPLETED:
            return
        self._ensure_not_purchased_elsewhere(db, payment)

        payment.status = PaymentStatusEnum.COMPLETED
        db.add(payment)
        try:
            db.flush()
        except IntegrityError:
            # Another payment for the same course completed first
            db.rollback()
            raise AlreadyPurchasedError()
        logger.info(f"Payment {payment.id} completed")

    def _complete_and_enroll(self, db: Session, payment: Payment) -> Payment:
        """Mark the payment completed and enroll the buyer if needed, within the caller's transaction."""
        self._mark_completed(db, payment)

        if crud_enrollment.get_by_user_and_course(db, user_id=payment.user_id, course_id=payment.course_id):
            return payment

        payment_id = payment.id
        try:
            enrollment_service.insert_enrollment(db, payment.user_id, payment.course_id)
        except AlreadyEnrolledError:
            # A concurrent request enrolled the buyer first; the rollback discarded our status change
            payment = crud_payment.get(db, id=payment_id)
            self._mark_completed(db, payment)
        return payment

    async def confirm_payment(
        self,
        db: Session,
        payment_intent_id: str,
        payment_id: int,
        current_user: User,
        gateway: PaymentGateway
    ) -> PaymentConfirmResult:
        payment = crud_payment.get(db, id=payment_id)
        if not payment or payment.user_id != current_user.id:
            raise NotFoundError("Payment", payment_id)
        if payment.payment_intent_id != payment_intent_id:
            raise ValidationError("Payment intent does not match payment")

        if payment.status != PaymentStatusEnum.COMPLETED:
            self._ensure_not_purchased_elsewhere(db, payment)
            succeeded = await gateway.confirm(payment_intent_id)
            if not succeeded:
                logger.warning(f"Payment {payment.id} not confirmed by processor")
                raise PaymentConfirmationFailedError()

        payment = self._complete_and_enroll(db, payment)
        return PaymentConfirmResult(success=True, payment_id=payment.id, course_id=payment.course_id)

    def complete_by_intent(self, db: Session, payment_intent_id: str):
        """Handle a processor notification that an intent succeeded."""
        payment = crud_payment.get_by_intent_id(db, payment_intent_id=payment_intent_id)
        if not payment:
            logger.warning(f"No payment for intent {payment_intent_id}")
            return None
        try:
            return self._complete_and_enroll(db, payment)
        except AlreadyPurchasedError:
            # The course was already bought with another intent; acknowledge so the processor stops retrying
            logger.warning(f"Intent {payment_intent_id} succeeded for an already purchased course; left pending")
            return None

    def list_purchases(self, db: Session, current_user: User) -> List[Payment]:
        return crud_payment.get_by_user(db, user_id=current_user.id)


payment_service = PaymentService()
