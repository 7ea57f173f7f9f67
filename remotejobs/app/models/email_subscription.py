"""
EmailSubscription - newsletter ledger, independent of user accounts
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from remotejobs.app.db.base import Base


class EmailSubscription(Base):
    __tablename__ = "email_subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lowercased
    subscribed_at = Column(DateTime, default=datetime.utcnow)
    active = Column(Boolean, default=True, nullable=False)
