import logging
from typing import List

import stripe
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from stripe import SignatureVerificationError

from coursex.core.config import settings
from coursex.models.user import User
from coursex.schemas.payment import (
    Payment as PaymentSchema,
    PaymentConfirm,
    PaymentConfirmResult,
    PaymentIntentCreate,
    PaymentIntentResult,
)
from coursex.schemas.response import APIResponse
from coursex.services.payment import payment_service
from coursex.services.payment_gateway import PaymentGateway
from coursex.utils import deps

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create-intent", response_model=APIResponse[PaymentIntentResult])
async def create_payment_intent(
    *,
    db: Session = Depends(deps.get_transactional_db),
    intent_in: PaymentIntentCreate,
    current_user: User = Depends(deps.get_current_user),
    gateway: PaymentGateway = Depends(deps.get_payment_gateway)
):
    result = await payment_service.create_payment_intent(
        db, course_id=intent_in.course_id, current_user=current_user, gateway=gateway
    )
    return APIResponse(message="Payment intent created successfully", data=result)


@router.post("/confirm", response_model=APIResponse[PaymentConfirmResult])
async def confirm_payment(
    *,
    db: Session = Depends(deps.get_transactional_db),
    confirm_in: PaymentConfirm,
    current_user: User = Depends(deps.get_current_user),
    gateway: PaymentGateway = Depends(deps.get_payment_gateway)
):
    result = await payment_service.confirm_payment(
        db,
        payment_intent_id=confirm_in.payment_intent_id,
        payment_id=confirm_in.payment_id,
        current_user=current_user,
        gateway=gateway
    )
    return APIResponse(message="Payment confirmed successfully", data=result)


@router.get("", response_model=APIResponse[List[PaymentSchema]])
def list_purchases(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    payments = payment_service.list_purchases(db, current_user=current_user)
    return APIResponse(message="Payments retrieved successfully", data=payments)


@router.post("/webhook")
async def payment_webhook(request: Request, db: Session = Depends(deps.get_transactional_db)):
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")

    if not settings.STRIPE_WEBHOOK_SECRET:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Webhook secret is not configured")

    try:
        event = stripe.Webhook.construct_event(payload, sig_header, settings.STRIPE_WEBHOOK_SECRET)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SignatureVerificationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if event["type"] == "payment_intent.succeeded":
        intent = event["data"]["object"]
        payment_service.complete_by_intent(db, payment_intent_id=intent["id"])
    else:
        logger.info(f"Unhandled event type {event['type']}")

    return {"status": "success"}
