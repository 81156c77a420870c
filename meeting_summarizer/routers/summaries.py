"""
Summary router: generation, editing, retrieval and email sharing
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from ..models.entities import EmailShare, Summary
from ..models.requests import (
    EmailSentResponse,
    GenerateSummaryRequest,
    SendEmailRequest,
    SummaryUpdateRequest,
)
from ..services.storage import Storage
from ..services.summary_service import SummaryNotFoundError, SummaryService
from ..dependencies import get_storage, get_summary_service

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.post("/generate", response_model=Summary)
async def generate_summary(
    request: GenerateSummaryRequest,
    summary_service: SummaryService = Depends(get_summary_service)
):
    """
    Summarize a meeting transcript.

    The transcript is stored first, then sent to the completion service
    with either the supplied instructions or the default prompt.
    """
    try:
        return await summary_service.generate_summary(request)
    except Exception as e:
        logger.error(f"Error generating summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate summary")


@router.post("/email", response_model=EmailSentResponse)
async def email_summary(
    request: SendEmailRequest,
    summary_service: SummaryService = Depends(get_summary_service)
):
    """
    Email a summary to every recipient.

    All sends must succeed; on any failure the request fails and no share
    record is written.
    """
    try:
        email_share = await summary_service.send_summary_email(request)
    except SummaryNotFoundError:
        raise HTTPException(status_code=404, detail="Summary not found")
    except Exception as e:
        logger.error(f"Error sending email: {e}")
        raise HTTPException(status_code=500, detail="Failed to send email")

    return EmailSentResponse(
        message=f"Summary sent successfully to {len(request.recipients)} recipient(s)",
        email_share=email_share
    )


@router.patch("/{summary_id}", response_model=Summary)
async def update_summary(
    summary_id: str,
    request: SummaryUpdateRequest,
    storage: Storage = Depends(get_storage)
):
    """Replace a summary's content; the word count is recomputed"""
    try:
        updated = await storage.update_summary(summary_id, request.content)
    except Exception as e:
        logger.error(f"Error updating summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to update summary")

    if updated is None:
        raise HTTPException(status_code=404, detail="Summary not found")

    logger.info(f"Summary {summary_id} edited ({updated.word_count} words)")
    return updated


@router.get("/{summary_id}", response_model=Summary)
async def get_summary(summary_id: str, storage: Storage = Depends(get_storage)):
    summary = await storage.get_summary(summary_id)
    if summary is None:
        raise HTTPException(status_code=404, detail="Summary not found")
    return summary


@router.get("/{summary_id}/email-shares", response_model=List[EmailShare])
async def list_email_shares(summary_id: str, storage: Storage = Depends(get_storage)):
    """Past sends of a summary, oldest first"""
    if await storage.get_summary(summary_id) is None:
        raise HTTPException(status_code=404, detail="Summary not found")
    return await storage.get_email_shares_by_summary_id(summary_id)
