"""
Models package initialization
"""

from .entities import *
from .requests import *

__all__ = [
    "Transcript",
    "Summary",
    "EmailShare",
    "TranscriptCreateRequest",
    "GenerateSummaryRequest",
    "SummaryUpdateRequest",
    "SendEmailRequest",
    "EmailSentResponse",
    "HealthResponse",
    "ErrorResponse"
]
