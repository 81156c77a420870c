"""
File handling utilities for transcript uploads
"""

import io
import os
import re
from typing import Optional

import docx
from fastapi import UploadFile
from loguru import logger

from ..config import settings, SUPPORTED_TRANSCRIPT_TYPES

DOCX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'


class DocumentExtractionError(Exception):
    """Raised when an uploaded document cannot be turned into text"""
    pass


class UploadTooLargeError(Exception):
    """Raised when an upload exceeds the configured size limit"""
    pass


class FileHandler:
    """Utility class for transcript upload handling"""

    @staticmethod
    def media_type(content_type: Optional[str]) -> str:
        """Bare media type of a Content-Type value, parameters dropped"""
        if not content_type:
            return ""
        return content_type.split(";")[0].strip().lower()

    @staticmethod
    def is_supported_transcript_type(content_type: Optional[str]) -> bool:
        """Check if the declared content type is accepted for transcripts"""
        return FileHandler.media_type(content_type) in SUPPORTED_TRANSCRIPT_TYPES

    @staticmethod
    def validate_file_size(file_size: int, max_size_mb: Optional[int] = None) -> bool:
        """Validate file size against limits"""
        max_size = max_size_mb or settings.max_upload_size_mb
        max_bytes = max_size * 1024 * 1024
        return file_size <= max_bytes

    @staticmethod
    def format_file_size(size_bytes: int) -> str:
        """Format file size in human-readable format"""
        size = float(size_bytes)
        for unit in ['B', 'KB', 'MB']:
            if size < 1024.0:
                return f"{size:.1f} {unit}"
            size /= 1024.0
        return f"{size:.1f} GB"

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Sanitize filename for safe storage"""
        sanitized = re.sub(r'[<>:"|?*\\/]', '_', filename)

        # Limit length
        if len(sanitized) > 255:
            name, ext = os.path.splitext(sanitized)
            sanitized = name[:255 - len(ext)] + ext

        return sanitized

    @staticmethod
    async def read_upload(file: UploadFile, max_size_mb: Optional[int] = None) -> bytes:
        """Read an uploaded file, refusing anything over the size limit"""
        max_size = max_size_mb or settings.max_upload_size_mb
        max_bytes = max_size * 1024 * 1024

        # Read one byte past the limit so oversize files are detected
        content = await file.read(max_bytes + 1)
        if not FileHandler.validate_file_size(len(content), max_size):
            raise UploadTooLargeError(f"File exceeds the {max_size}MB limit")
        return content

    @staticmethod
    def extract_text(content: bytes, content_type: str) -> str:
        """Extract transcript text from uploaded bytes"""
        if FileHandler.media_type(content_type) == DOCX_CONTENT_TYPE:
            return FileHandler.extract_text_from_docx(content)
        return content.decode('utf-8', errors='replace')

    @staticmethod
    def extract_text_from_docx(content: bytes) -> str:
        """Extract text from DOCX paragraphs and table rows"""
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as e:
            logger.warning(f"Could not open DOCX upload: {e}")
            raise DocumentExtractionError("Uploaded file is not a readable .docx document") from e

        lines = [para.text for para in document.paragraphs if para.text.strip()]

        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(" | ".join(cells))

        return "\n".join(lines)
