"""
Email subscription ledger - subscribe / unsubscribe, independent of accounts
"""
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from remotejobs.app.core.errors import ConflictError, ValidationError
from remotejobs.app.core.logging_config import get_logger
from remotejobs.app.models.email_subscription import EmailSubscription
from remotejobs.app.utils.validators import is_valid_email, normalize_email

logger = get_logger("services.subscription")


class SubscriptionService:
    def __init__(self, db: Session):
        self.db = db

    def _find(self, email: str) -> EmailSubscription | None:
        return self.db.query(EmailSubscription).filter(EmailSubscription.email == email).first()

    def subscribe(self, email: str | None) -> EmailSubscription:
        """Create an active subscription, or re-activate a lapsed one."""
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required")
        if not is_valid_email(email):
            raise ValidationError("Please enter a valid email")

        existing = self._find(email)
        if existing and existing.active:
            raise ConflictError("Email already subscribed")

        if existing:
            existing.active = True
            existing.subscribed_at = datetime.utcnow()
            subscription = existing
            logger.info("Subscription re-activated email=%s", email)
        else:
            subscription = EmailSubscription(email=email, active=True)
            self.db.add(subscription)
            logger.info("Subscription created email=%s", email)

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email already subscribed")
        self.db.refresh(subscription)
        return subscription

    def unsubscribe(self, email: str | None) -> None:
        """Mark the address inactive. Unknown addresses are ignored."""
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required")
        subscription = self._find(email)
        if not subscription:
            return
        subscription.active = False
        self.db.commit()
        logger.info("Subscription deactivated email=%s", email)
