"""
Utilities package initialization
"""

from .file_handler import FileHandler, DocumentExtractionError, UploadTooLargeError
from .formatting import count_words, build_summary_prompt, build_email_body, render_html_body
from .validators import format_validation_errors

__all__ = [
    "FileHandler",
    "DocumentExtractionError",
    "UploadTooLargeError",
    "count_words",
    "build_summary_prompt",
    "build_email_body",
    "render_html_body",
    "format_validation_errors"
]
