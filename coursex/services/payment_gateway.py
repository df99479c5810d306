"""Payment processor collaborators: Stripe, and a deterministic stand-in for local use."""

import logging
import uuid
from typing import Any, Dict, Optional

import stripe

from coursex.core.config import settings
from coursex.core.exceptions import UpstreamFailureError
from coursex.models.course import Course
from coursex.models.user import User
from coursex.schemas.payment import GatewayIntent
from coursex.utils.money import split_amount, to_cents

logger = logging.getLogger(__name__)


class PaymentGateway:
    """Creates payment intents and reports whether one has succeeded."""

    async def create_intent(self, amount: float, course: Course, user: User) -> GatewayIntent:
        raise NotImplementedError

    async def retrieve_intent(self, payment_intent_id: str) -> GatewayIntent:
        raise NotImplementedError

    async def confirm(self, payment_intent_id: str) -> bool:
        raise NotImplementedError


class StripePaymentGateway(PaymentGateway):
    def __init__(self, api_key: Optional[str] = None):
        stripe.api_key = api_key or settings.STRIPE_SECRET_KEY

    async def _make_request(self, stripe_api_call, *args, **kwargs):
        try:
            return stripe_api_call(*args, **kwargs)
        except stripe.StripeError as e:
            logger.error(f"Stripe error: {e.user_message or e}")
            raise UpstreamFailureError(f"Stripe error: {e.user_message or 'request failed'}")

    def _metadata(self, amount: float, course: Course, user: User) -> Dict[str, Any]:
        platform_fee, instructor_amount = split_amount(amount, settings.PLATFORM_FEE_PERCENT)
        return {
            "course_id": str(course.id),
            "user_id": str(user.id),
            "course_title": course.title,
            "platform_fee": str(platform_fee),
            "instructor_amount": str(instructor_amount),
        }

    async def create_intent(self, amount: float, course: Course, user: User) -> GatewayIntent:
        intent = await self._make_request(
            stripe.PaymentIntent.create,
            amount=to_cents(amount),
            currency=settings.PAYMENT_CURRENCY,
            metadata=self._metadata(amount, course, user),
            automatic_payment_methods={"enabled": True},
        )
        return GatewayIntent(payment_intent_id=intent.id, client_secret=intent.client_secret)

    async def retrieve_intent(self, payment_intent_id: str) -> GatewayIntent:
        intent = await self._make_request(stripe.PaymentIntent.retrieve, payment_intent_id)
        return GatewayIntent(payment_intent_id=intent.id, client_secret=intent.client_secret)

    async def confirm(self, payment_intent_id: str) -> bool:
        intent = await self._make_request(stripe.PaymentIntent.retrieve, payment_intent_id)
        return intent.status == "succeeded"


class MockPaymentGateway(PaymentGateway):
    """Used when no processor key is configured. Every intent confirms successfully."""

    async def create_intent(self, amount: float, course: Course, user: User) -> GatewayIntent:
        intent_id = f"pi_mock_{uuid.uuid4().hex}"
        logger.info(f"Mock payment intent {intent_id} for course {course.id} ({amount})")
        return GatewayIntent(payment_intent_id=intent_id, client_secret=None)

    async def retrieve_intent(self, payment_intent_id: str) -> GatewayIntent:
        return GatewayIntent(payment_intent_id=payment_intent_id, client_secret=None)

    async def confirm(self, payment_intent_id: str) -> bool:
        return True
