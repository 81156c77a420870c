"""
Stored record models for transcripts, summaries and email shares
"""

import json
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EntityModel(BaseModel):
    """Base for stored records: frozen, serialized with camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Transcript(EntityModel):
    """Raw meeting transcript, optionally tagged with its source file name"""
    id: str
    content: str
    file_name: Optional[str] = None
    created_at: datetime


class Summary(EntityModel):
    """AI-generated summary of a transcript; content is editable"""
    id: str
    transcript_id: str
    content: str
    custom_instructions: Optional[str] = None
    word_count: Optional[str] = None
    created_at: datetime


class EmailShare(EntityModel):
    """Historical record of a summary being emailed"""
    id: str
    summary_id: str
    recipients: str  # JSON array of addresses
    subject: str
    message: Optional[str] = None
    sent_at: datetime

    @property
    def recipient_list(self) -> List[str]:
        return json.loads(self.recipients)
