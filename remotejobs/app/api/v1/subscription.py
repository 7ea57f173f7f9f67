"""
Email subscription endpoints - no authentication
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from remotejobs.app.core.dependencies import get_db
from remotejobs.app.schemas.subscription import (
    SubscribeEnvelope,
    SubscriptionIn,
    UnsubscribeEnvelope,
    subscription_to_response,
)
from remotejobs.app.services.subscription_service import SubscriptionService

router = APIRouter()


@router.post("/subscribe", response_model=SubscribeEnvelope, status_code=status.HTTP_201_CREATED)
def subscribe(payload: SubscriptionIn, db: Session = Depends(get_db)):
    """Subscribe an address to email updates. A lapsed subscription is re-activated."""
    subscription = SubscriptionService(db).subscribe(payload.email)
    return SubscribeEnvelope(subscription=subscription_to_response(subscription))


@router.delete("/unsubscribe", response_model=UnsubscribeEnvelope)
def unsubscribe(payload: SubscriptionIn, db: Session = Depends(get_db)):
    SubscriptionService(db).unsubscribe(payload.email)
    return UnsubscribeEnvelope()
