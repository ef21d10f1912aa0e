"""
ReplyGuard Database Models
==========================
SQLAlchemy models for released replies and clinician feedback.
"""
import uuid

from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _new_reply_id() -> str:
    return str(uuid.uuid4())


class Reply(Base):
    """A drafted reply that passed validation and was released."""
    __tablename__ = "replies"

    id = Column(String(36), primary_key=True, default=_new_reply_id)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Request
    classification = Column(String(100), index=True)
    patient_messages = Column(Text)

    # Normalized reply text
    ai_reply = Column(Text)

    # Clinician feedback
    feedback = Column(String(20))  # useful, not_useful
    feedback_comment = Column(Text)
