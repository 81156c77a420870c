"""
Transcript router: creating transcripts from text or uploaded files
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from loguru import logger

from ..models.entities import Summary, Transcript
from ..models.requests import TranscriptCreateRequest
from ..services.storage import Storage
from ..dependencies import get_storage
from ..utils.file_handler import DocumentExtractionError, FileHandler, UploadTooLargeError

router = APIRouter(prefix="/transcripts", tags=["transcripts"])


@router.post("/upload", response_model=Transcript)
async def upload_transcript(
    file: Optional[UploadFile] = File(None),
    storage: Storage = Depends(get_storage)
):
    """
    Upload a transcript file (.txt or .docx, up to 10MB).

    The content type is checked before the body is read; .docx files are
    parsed into plain text.
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    if not FileHandler.is_supported_transcript_type(file.content_type):
        raise HTTPException(status_code=400, detail="Only .txt and .docx files are allowed")

    try:
        raw = await FileHandler.read_upload(file)
        content = FileHandler.extract_text(raw, file.content_type)

        if not content.strip():
            raise HTTPException(status_code=400, detail="Uploaded file contains no text")

        file_name = FileHandler.sanitize_filename(file.filename) if file.filename else None
        transcript = await storage.create_transcript(content=content, file_name=file_name)

        logger.info(
            f"Transcript {transcript.id} uploaded from {file_name} "
            f"({FileHandler.format_file_size(len(raw))})"
        )
        return transcript

    except HTTPException:
        raise
    except (UploadTooLargeError, DocumentExtractionError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error uploading transcript: {e}")
        raise HTTPException(status_code=500, detail="Failed to upload transcript")


@router.post("", response_model=Transcript)
async def create_transcript(
    request: TranscriptCreateRequest,
    storage: Storage = Depends(get_storage)
):
    """Create a transcript from pasted text"""
    try:
        transcript = await storage.create_transcript(content=request.content)
    except Exception as e:
        logger.error(f"Error creating transcript: {e}")
        raise HTTPException(status_code=500, detail="Failed to create transcript")

    logger.info(f"Transcript {transcript.id} created from text")
    return transcript


@router.get("/{transcript_id}", response_model=Transcript)
async def get_transcript(transcript_id: str, storage: Storage = Depends(get_storage)):
    transcript = await storage.get_transcript(transcript_id)
    if transcript is None:
        raise HTTPException(status_code=404, detail="Transcript not found")
    return transcript


@router.get("/{transcript_id}/summaries", response_model=List[Summary])
async def list_transcript_summaries(transcript_id: str, storage: Storage = Depends(get_storage)):
    """Summaries generated from a transcript, oldest first"""
    if await storage.get_transcript(transcript_id) is None:
        raise HTTPException(status_code=404, detail="Transcript not found")
    return await storage.get_summaries_by_transcript_id(transcript_id)
