"""
Test configuration and fixtures
"""

import os

# Keep test runs from writing the rotating log file
os.environ.setdefault("LOG_FILE", "")

import pytest
from httpx import AsyncClient, ASGITransport

from meeting_summarizer.main import create_app
from meeting_summarizer.services.email_service import EmailDeliveryError
from meeting_summarizer.services.storage import InMemoryStorage


class FakeCompletionService:
    """Completion collaborator returning canned text"""

    def __init__(self, response="Key points:\n- Ship on Friday\n\nAction items:\n- Bob to prepare release"):
        self.response = response
        self.error = None
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.response

    async def close(self):
        pass


class FakeEmailService:
    """Mail collaborator recording every send; fails for chosen recipients"""

    def __init__(self):
        self.sent = []
        self.fail_for = set()

    async def send(self, recipient, subject, text, html):
        if recipient in self.fail_for:
            raise EmailDeliveryError(f"Failed to send email to {recipient}")
        self.sent.append({
            "recipient": recipient,
            "subject": subject,
            "text": text,
            "html": html
        })


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def completion_service():
    return FakeCompletionService()


@pytest.fixture
def email_service():
    return FakeEmailService()


@pytest.fixture
def app(storage, completion_service, email_service):
    return create_app(
        storage=storage,
        completion_service=completion_service,
        email_service=email_service
    )


@pytest.fixture
async def async_client(app):
    """Create an async HTTP client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_transcript():
    return """
    Alice: Good morning everyone. Let's go over the release plan.
    Bob: The build is green and QA signed off yesterday.
    Alice: Great, let's ship Friday.
    Bob: Agreed. I'll prepare the release notes.
    Carol: I'll update the customer announcement.
    """.strip()


@pytest.fixture
async def stored_summary(storage):
    """A transcript with one generated summary already in the store"""
    transcript = await storage.create_transcript("Alice: let's ship Friday. Bob: agreed.")
    return await storage.create_summary(
        transcript_id=transcript.id,
        content="Team agreed to ship on Friday.",
        custom_instructions="Summarize briefly."
    )
