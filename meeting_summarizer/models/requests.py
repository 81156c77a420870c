"""
Request and Response models for API endpoints
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from .entities import EmailShare


class ApiModel(BaseModel):
    """Request/response base accepting camelCase or snake_case keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranscriptCreateRequest(ApiModel):
    """Request model for creating a transcript from pasted text"""
    content: StrictStr

    @field_validator('content')
    @classmethod
    def strip_content(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Content is required')
        return v


class GenerateSummaryRequest(ApiModel):
    """Request model for summary generation"""
    transcript_content: StrictStr = Field(..., min_length=1)
    custom_instructions: Optional[StrictStr] = None


class SummaryUpdateRequest(ApiModel):
    """Request model for editing a summary"""
    content: StrictStr = Field(..., min_length=1)


class SendEmailRequest(ApiModel):
    """Request model for emailing a summary"""
    summary_id: StrictStr = Field(..., min_length=1)
    recipients: List[EmailStr] = Field(..., min_length=1)
    subject: StrictStr = Field(..., min_length=1)
    message: Optional[StrictStr] = None

    @field_validator('recipients', mode='wrap')
    @classmethod
    def keep_plain_addresses(cls, v, handler):
        # EmailStr accepts "Name <addr>" and lowercases the domain; store what was sent
        handler(v)
        for address in v:
            if '<' in address or '>' in address or address != address.strip():
                raise ValueError(f'{address!r} is not a plain email address')
        return list(v)


class EmailSentResponse(ApiModel):
    """Response model for a completed email send"""
    message: str
    email_share: EmailShare


class HealthResponse(BaseModel):
    """Response model for health check"""
    status: str
    timestamp: datetime
    version: str
    services: Dict[str, str]
    uptime_seconds: float


class ErrorResponse(BaseModel):
    """Response model for errors"""
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime
    request_id: Optional[str] = None
