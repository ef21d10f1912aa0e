"""
ReplyGuard Reply Store
======================
Persisting released replies, recording clinician feedback and exporting
the reply history as CSV.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional, Iterable, List
import csv
import io
import logging

from ..models.database import Reply

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "ID",
    "Created At",
    "Classification",
    "Patient Messages",
    "AI Reply",
    "Feedback",
    "Feedback Comment",
]


async def create_reply(
    db: AsyncSession,
    classification: str,
    patient_messages: str,
    ai_reply: str,
) -> Reply:
    """Store a reply that passed validation."""
    reply = Reply(
        classification=classification,
        patient_messages=patient_messages,
        ai_reply=ai_reply,
    )

    db.add(reply)
    await db.commit()
    await db.refresh(reply)

    logger.info(f"Reply stored: {reply.id} ({classification})")

    return reply


async def record_feedback(
    db: AsyncSession,
    reply_id: str,
    feedback: str,
    comment: Optional[str] = None,
) -> Optional[Reply]:
    """
    Attach clinician feedback to a stored reply.
    Returns None when no reply has that id.
    """
    reply = await db.get(Reply, reply_id)
    if reply is None:
        logger.warning(f"Feedback for unknown reply: {reply_id}")
        return None

    reply.feedback = feedback
    if comment is not None:
        reply.feedback_comment = comment

    await db.commit()
    await db.refresh(reply)

    logger.info(f"Feedback recorded: {reply_id} -> {feedback}")

    return reply


async def list_replies(db: AsyncSession) -> List[Reply]:
    """All stored replies, newest first."""
    query = select(Reply).order_by(Reply.created_at.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


def replies_to_csv(rows: Iterable[Reply]) -> str:
    """Render replies as CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for row in rows:
        writer.writerow([
            row.id,
            row.created_at.isoformat() if row.created_at else "",
            row.classification,
            row.patient_messages or "",
            row.ai_reply or "",
            row.feedback or "",
            row.feedback_comment or "",
        ])

    return buffer.getvalue()
