"""
ReplyGuard - Reply API Routes
=============================
Endpoints for drafting, reviewing and exporting clinic replies.
"""

import logging
from typing import Union

from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from ...db import get_db
from ...core.reply_validation import validate_reply
from ...core.rules import KNOWN_CLASSIFICATIONS
from ...core.scenarios import Scenario
from ...models.replies import (
    GenerateReplyRequest,
    GeneratedReplyResponse,
    ReviewRequiredResponse,
    FeedbackRequest,
    FeedbackResponse,
    ClassificationsResponse,
)
from ...services.reply_generator import ReplyGenerator, get_reply_generator
from ...services import replies as reply_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/replies", tags=["Replies"])

MANUAL_REVIEW_MESSAGE = "⚠️ الرد يحتاج مراجعة يدوية"


# =============================================================
# ENDPOINTS
# =============================================================

@router.post(
    "/generate",
    response_model=Union[GeneratedReplyResponse, ReviewRequiredResponse],
)
async def generate_reply(
    request: GenerateReplyRequest,
    db: AsyncSession = Depends(get_db),
    generator: ReplyGenerator = Depends(get_reply_generator),
):
    """
    Draft a reply and gate it through the validation pipeline.

    - Passed: the normalized reply is stored and returned with its id
    - Failed: the normalized reply is returned flagged for manual review,
      nothing is stored
    """
    if not request.classification or not request.patient_messages:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        raw_reply = await generator.generate(request.classification, request.patient_messages)

        result = validate_reply(raw_reply, request.classification)

        if result.scenario is Scenario.DEFAULT:
            logger.info(
                "No scenario rules for classification %r; generic checks only",
                request.classification,
            )

        if not result.passed:
            logger.warning(
                "Reply rejected for manual review (scenario=%s, check=%s)",
                result.scenario.value,
                result.failed_check.value,
            )
            return ReviewRequiredResponse(
                ai_reply=result.normalized_text,
                message=MANUAL_REVIEW_MESSAGE,
            )

        reply = await reply_store.create_reply(
            db,
            classification=request.classification,
            patient_messages=request.patient_messages,
            ai_reply=result.normalized_text,
        )

        return GeneratedReplyResponse(id=reply.id, ai_reply=result.normalized_text)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Generate error")
        raise HTTPException(status_code=500, detail=str(e) or "Internal server error")


@router.post("/feedback", response_model=FeedbackResponse)
async def submit_feedback(
    request: FeedbackRequest,
    db: AsyncSession = Depends(get_db),
):
    """Record clinician feedback (useful / not_useful) on a stored reply."""
    if not request.id or not request.feedback:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        reply = await reply_store.record_feedback(
            db,
            reply_id=request.id,
            feedback=request.feedback.value,
            comment=request.feedback_comment,
        )
    except Exception as e:
        logger.exception("Feedback error")
        raise HTTPException(status_code=500, detail=str(e) or "Internal server error")

    if reply is None:
        raise HTTPException(status_code=404, detail=f"Reply not found: {request.id}")

    return FeedbackResponse(success=True)


@router.get("/export")
async def export_replies(db: AsyncSession = Depends(get_db)):
    """Download every stored reply as CSV, newest first."""
    try:
        rows = await reply_store.list_replies(db)
        csv_text = reply_store.replies_to_csv(rows)
    except Exception as e:
        logger.exception("Export error")
        raise HTTPException(status_code=500, detail=str(e) or "Internal server error")

    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=replies_export.csv"},
    )


@router.get("/classifications", response_model=ClassificationsResponse)
async def get_classifications():
    """Classification labels offered to the drafting UI."""
    return ClassificationsResponse(classifications=list(KNOWN_CLASSIFICATIONS))
