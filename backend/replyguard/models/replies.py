"""
ReplyGuard - Reply API Models
=============================
Pydantic models for request/response validation.
"""

from pydantic import BaseModel
from typing import List, Optional
from enum import Enum


# =============================================================
# ENUMS
# =============================================================

class FeedbackValue(str, Enum):
    USEFUL = "useful"
    NOT_USEFUL = "not_useful"


# =============================================================
# REQUEST MODELS
# =============================================================

class GenerateReplyRequest(BaseModel):
    """Patient messages to draft a reply for."""
    classification: Optional[str] = None
    patient_messages: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "classification": "MRI + Period",
                "patient_messages": "مرحبا دكتورة، عندي موعد رنين والدورة بتيجي بنفس الأسبوع"
            }
        }


class FeedbackRequest(BaseModel):
    """Clinician feedback on a released reply."""
    id: Optional[str] = None
    feedback: Optional[FeedbackValue] = None
    feedback_comment: Optional[str] = None


# =============================================================
# RESPONSE MODELS
# =============================================================

class GeneratedReplyResponse(BaseModel):
    """Reply that passed validation and was stored."""
    id: str
    ai_reply: str


class ReviewRequiredResponse(BaseModel):
    """Reply that failed validation and needs manual review."""
    ai_reply: str
    qa_failed: bool = True
    message: str


class FeedbackResponse(BaseModel):
    success: bool


class ClassificationsResponse(BaseModel):
    classifications: List[str]
