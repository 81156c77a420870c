"""
Storage service for transcripts, summaries and email shares

`Storage` is the capability set the request handlers depend on. The
in-memory variant keeps everything in dicts for the lifetime of the
process; a durable backend must implement the same contract, including
returning None (not raising) for read and update misses.
"""

import json
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from loguru import logger

from ..models.entities import EmailShare, Summary, Transcript
from ..utils.formatting import count_words


class StorageError(Exception):
    """Base exception for storage errors"""
    pass


class ReferenceNotFoundError(StorageError):
    """Raised when a record references a parent that does not exist"""
    pass


class Storage(ABC):
    """Create/read/update/filter operations for every entity kind"""

    @abstractmethod
    async def create_transcript(self, content: str, file_name: Optional[str] = None) -> Transcript:
        ...

    @abstractmethod
    async def get_transcript(self, transcript_id: str) -> Optional[Transcript]:
        ...

    @abstractmethod
    async def create_summary(
        self,
        transcript_id: str,
        content: str,
        custom_instructions: Optional[str] = None
    ) -> Summary:
        ...

    @abstractmethod
    async def get_summary(self, summary_id: str) -> Optional[Summary]:
        ...

    @abstractmethod
    async def update_summary(self, summary_id: str, content: str) -> Optional[Summary]:
        ...

    @abstractmethod
    async def get_summaries_by_transcript_id(self, transcript_id: str) -> List[Summary]:
        ...

    @abstractmethod
    async def create_email_share(
        self,
        summary_id: str,
        recipients: Sequence[str],
        subject: str,
        message: Optional[str] = None
    ) -> EmailShare:
        ...

    @abstractmethod
    async def get_email_shares_by_summary_id(self, summary_id: str) -> List[EmailShare]:
        ...


class InMemoryStorage(Storage):
    """Dict-backed storage; nothing survives a restart"""

    def __init__(self):
        self.transcripts: Dict[str, Transcript] = {}
        self.summaries: Dict[str, Summary] = {}
        self.email_shares: Dict[str, EmailShare] = {}

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    async def create_transcript(self, content: str, file_name: Optional[str] = None) -> Transcript:
        transcript = Transcript(
            id=self._new_id(),
            content=content,
            file_name=file_name or None,
            created_at=self._now()
        )
        self.transcripts[transcript.id] = transcript
        logger.debug(f"Stored transcript {transcript.id} ({len(content)} chars)")
        return transcript

    async def get_transcript(self, transcript_id: str) -> Optional[Transcript]:
        return self.transcripts.get(transcript_id)

    async def create_summary(
        self,
        transcript_id: str,
        content: str,
        custom_instructions: Optional[str] = None
    ) -> Summary:
        if transcript_id not in self.transcripts:
            raise ReferenceNotFoundError(f"Transcript {transcript_id} does not exist")

        summary = Summary(
            id=self._new_id(),
            transcript_id=transcript_id,
            content=content,
            custom_instructions=custom_instructions or None,
            word_count=count_words(content),
            created_at=self._now()
        )
        self.summaries[summary.id] = summary
        logger.debug(f"Stored summary {summary.id} for transcript {transcript_id}")
        return summary

    async def get_summary(self, summary_id: str) -> Optional[Summary]:
        return self.summaries.get(summary_id)

    async def update_summary(self, summary_id: str, content: str) -> Optional[Summary]:
        summary = self.summaries.get(summary_id)
        if summary is None:
            return None

        updated = summary.model_copy(update={
            "content": content,
            "word_count": count_words(content),
        })
        self.summaries[summary_id] = updated
        logger.debug(f"Updated summary {summary_id} ({updated.word_count} words)")
        return updated

    async def get_summaries_by_transcript_id(self, transcript_id: str) -> List[Summary]:
        return [s for s in self.summaries.values() if s.transcript_id == transcript_id]

    async def create_email_share(
        self,
        summary_id: str,
        recipients: Sequence[str],
        subject: str,
        message: Optional[str] = None
    ) -> EmailShare:
        if summary_id not in self.summaries:
            raise ReferenceNotFoundError(f"Summary {summary_id} does not exist")

        email_share = EmailShare(
            id=self._new_id(),
            summary_id=summary_id,
            recipients=json.dumps(list(recipients)),
            subject=subject,
            message=message or None,
            sent_at=self._now()
        )
        self.email_shares[email_share.id] = email_share
        logger.debug(f"Stored email share {email_share.id} for summary {summary_id}")
        return email_share

    async def get_email_shares_by_summary_id(self, summary_id: str) -> List[EmailShare]:
        return [e for e in self.email_shares.values() if e.summary_id == summary_id]
