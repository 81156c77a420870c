"""
Summary orchestration: generating summaries and emailing them
"""

import asyncio
import time

from loguru import logger

from ..config import DEFAULT_SUMMARY_INSTRUCTIONS
from ..models.entities import EmailShare, Summary
from ..models.requests import GenerateSummaryRequest, SendEmailRequest
from ..utils.formatting import build_email_body, build_summary_prompt, render_html_body
from .completion_service import CompletionService
from .email_service import EmailService
from .storage import Storage


class SummaryNotFoundError(Exception):
    """Raised when a summary id does not resolve to a stored summary"""
    pass


class SummaryService:
    """Sequences store writes around the completion and mail collaborators"""

    def __init__(
        self,
        storage: Storage,
        completion_service: CompletionService,
        email_service: EmailService
    ):
        self.storage = storage
        self.completion_service = completion_service
        self.email_service = email_service

    async def generate_summary(self, request: GenerateSummaryRequest) -> Summary:
        """
        Store the transcript, ask the completion service for a summary and
        store the result. The summary records the instructions actually used,
        which is the default prompt when none were supplied.
        """
        start_time = time.time()

        transcript = await self.storage.create_transcript(request.transcript_content)

        instructions = request.custom_instructions or DEFAULT_SUMMARY_INSTRUCTIONS
        prompt = build_summary_prompt(instructions, request.transcript_content)

        summary_content = await self.completion_service.generate(prompt)

        summary = await self.storage.create_summary(
            transcript_id=transcript.id,
            content=summary_content,
            custom_instructions=instructions
        )

        logger.info(
            f"Generated summary {summary.id} for transcript {transcript.id} "
            f"({summary.word_count} words, {time.time() - start_time:.2f}s)"
        )
        return summary

    async def send_summary_email(self, request: SendEmailRequest) -> EmailShare:
        """
        Email the summary to every recipient, then record the share.

        Sends run concurrently and are joined; the first failure propagates
        and nothing is recorded, even if some messages already went out.
        """
        summary = await self.storage.get_summary(request.summary_id)
        if summary is None:
            raise SummaryNotFoundError(f"Summary {request.summary_id} not found")

        text_body = build_email_body(summary.content, request.message)
        html_body = render_html_body(text_body)
        recipients = [str(r) for r in request.recipients]

        logger.info(f"Sending summary {summary.id} to {len(recipients)} recipient(s)")

        await asyncio.gather(*[
            self.email_service.send(recipient, request.subject, text_body, html_body)
            for recipient in recipients
        ])

        return await self.storage.create_email_share(
            summary_id=summary.id,
            recipients=recipients,
            subject=request.subject,
            message=request.message
        )
