"""
Services package initialization
"""

from .storage import Storage, InMemoryStorage, StorageError, ReferenceNotFoundError
from .completion_service import CompletionService, CompletionServiceError
from .email_service import EmailService, EmailDeliveryError
from .summary_service import SummaryService, SummaryNotFoundError

__all__ = [
    "Storage",
    "InMemoryStorage",
    "StorageError",
    "ReferenceNotFoundError",
    "CompletionService",
    "CompletionServiceError",
    "EmailService",
    "EmailDeliveryError",
    "SummaryService",
    "SummaryNotFoundError"
]
