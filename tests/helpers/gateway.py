import uuid
from typing import List

from coursex.core.exceptions import UpstreamFailureError
from coursex.schemas.payment import GatewayIntent
from coursex.services.payment_gateway import PaymentGateway


class FakePaymentGateway(PaymentGateway):
    """In-memory processor whose outcome each test controls."""

    def __init__(self):
        self.succeed = True
        self.fail_create = False
        self.created: List[dict] = []
        self.confirmed: List[str] = []
        self.retrieved: List[str] = []

    async def create_intent(self, amount, course, user) -> GatewayIntent:
        if self.fail_create:
            raise UpstreamFailureError("Stripe error: card network unavailable")
        intent_id = f"pi_test_{uuid.uuid4().hex[:12]}"
        self.created.append({"id": intent_id, "amount": amount, "course_id": course.id, "user_id": user.id})
        return GatewayIntent(payment_intent_id=intent_id, client_secret=f"{intent_id}_secret")

    async def retrieve_intent(self, payment_intent_id: str) -> GatewayIntent:
        self.retrieved.append(payment_intent_id)
        return GatewayIntent(payment_intent_id=payment_intent_id, client_secret=f"{payment_intent_id}_secret")

    async def confirm(self, payment_intent_id: str) -> bool:
        self.confirmed.append(payment_intent_id)
        return self.succeed
