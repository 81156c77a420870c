"""
Test summary generation, editing and retrieval endpoints
"""

from httpx import AsyncClient

from meeting_summarizer.config import DEFAULT_SUMMARY_INSTRUCTIONS
from meeting_summarizer.main import create_app
from meeting_summarizer.services.completion_service import CompletionServiceError


class TestGenerateSummary:
    """Test summary generation."""

    async def test_generate_with_default_instructions(self, async_client: AsyncClient, completion_service, storage):
        transcript = "Alice: let's ship Friday. Bob: agreed."

        response = await async_client.post(
            "/api/summaries/generate",
            json={"transcriptContent": transcript}
        )

        assert response.status_code == 200
        data = response.json()

        assert len(completion_service.prompts) == 1
        prompt = completion_service.prompts[0]
        assert prompt.startswith(DEFAULT_SUMMARY_INSTRUCTIONS)
        assert prompt.endswith(f"Transcript:\n{transcript}")

        assert data["customInstructions"] == DEFAULT_SUMMARY_INSTRUCTIONS
        assert data["content"] == completion_service.response
        assert data["wordCount"] == str(len(completion_service.response.split()))

        stored_transcript = storage.transcripts[data["transcriptId"]]
        assert stored_transcript.content == transcript
        assert stored_transcript.file_name is None

    async def test_generate_with_custom_instructions(self, async_client: AsyncClient, completion_service):
        response = await async_client.post(
            "/api/summaries/generate",
            json={
                "transcriptContent": "Bob: budget approved.",
                "customInstructions": "List decisions only."
            }
        )

        assert response.status_code == 200
        assert response.json()["customInstructions"] == "List decisions only."
        assert completion_service.prompts[0] == "List decisions only.\n\nTranscript:\nBob: budget approved."

    async def test_generate_empty_completion(self, async_client: AsyncClient, completion_service):
        completion_service.response = ""

        response = await async_client.post(
            "/api/summaries/generate",
            json={"transcriptContent": "Alice: nothing to report."}
        )

        assert response.status_code == 200
        assert response.json()["content"] == ""
        assert response.json()["wordCount"] == "0"

    async def test_generate_missing_transcript_content(self, async_client: AsyncClient, completion_service, storage):
        response = await async_client.post("/api/summaries/generate", json={"transcriptContent": ""})

        assert response.status_code == 400
        errors = response.json()["details"]["validation_errors"]
        assert any("transcriptContent" in e["field"] for e in errors)
        assert completion_service.prompts == []
        assert storage.transcripts == {}

    async def test_generate_completion_failure(self, async_client: AsyncClient, completion_service, storage):
        completion_service.error = CompletionServiceError("upstream unavailable")

        response = await async_client.post(
            "/api/summaries/generate",
            json={"transcriptContent": "Alice: let's ship Friday."}
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to generate summary"
        assert "upstream" not in response.text
        assert storage.summaries == {}


class TestEditSummary:
    """Test summary retrieval and editing."""

    async def test_get_summary(self, async_client: AsyncClient, stored_summary):
        response = await async_client.get(f"/api/summaries/{stored_summary.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == stored_summary.id
        assert data["transcriptId"] == stored_summary.transcript_id
        assert data["content"] == stored_summary.content

    async def test_get_unknown_summary(self, async_client: AsyncClient):
        response = await async_client.get("/api/summaries/missing")

        assert response.status_code == 404
        assert response.json()["message"] == "Summary not found"

    async def test_update_summary(self, async_client: AsyncClient, stored_summary):
        response = await async_client.patch(
            f"/api/summaries/{stored_summary.id}",
            json={"content": "one two three"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "one two three"
        assert data["wordCount"] == "3"
        assert data["id"] == stored_summary.id

    async def test_update_with_empty_content_leaves_summary_unchanged(self, async_client: AsyncClient, stored_summary):
        response = await async_client.patch(f"/api/summaries/{stored_summary.id}", json={"content": ""})
        assert response.status_code == 400

        response = await async_client.get(f"/api/summaries/{stored_summary.id}")
        assert response.json()["content"] == stored_summary.content

    async def test_update_missing_content(self, async_client: AsyncClient, stored_summary):
        response = await async_client.patch(f"/api/summaries/{stored_summary.id}", json={})

        assert response.status_code == 400

    async def test_update_unknown_summary(self, async_client: AsyncClient, storage):
        response = await async_client.patch("/api/summaries/missing", json={"content": "new text"})

        assert response.status_code == 404
        assert storage.summaries == {}


class TestApiInfo:
    """Test informational endpoints."""

    async def test_health_check(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] in ("healthy", "degraded")
        assert data["services"]["storage"] == "InMemoryStorage"
        assert "uptime_seconds" in data

    async def test_root_endpoint(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert data["endpoints"]["generate_summary"] == "/api/summaries/generate"

    async def test_request_id_header(self, async_client: AsyncClient):
        response = await async_client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_create_app_builds_default_collaborators(self):
        app = create_app()

        assert app.state.storage is not None
        assert app.state.summary_service.storage is app.state.storage
