"""
Email subscription schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SubscriptionIn(BaseModel):
    email: Optional[str] = None


class SubscriptionResponse(BaseModel):
    email: str
    subscribedAt: Optional[datetime] = None
    active: bool = True


class SubscribeEnvelope(BaseModel):
    success: bool = True
    message: str = "Successfully subscribed to email updates"
    subscription: SubscriptionResponse


class UnsubscribeEnvelope(BaseModel):
    success: bool = True
    message: str = "Successfully unsubscribed"


def subscription_to_response(sub) -> SubscriptionResponse:
    return SubscriptionResponse(email=sub.email, subscribedAt=sub.subscribed_at, active=sub.active)
