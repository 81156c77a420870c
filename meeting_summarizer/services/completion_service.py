"""
Completion service for summary generation via an OpenAI-compatible API (Groq)
"""

from typing import Optional

import openai
from loguru import logger

from ..config import Settings, settings as default_settings


class CompletionServiceError(Exception):
    """Custom exception for completion service errors"""
    pass


class CompletionService:
    """Service for turning a prompt into generated text"""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 2048
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = openai.AsyncOpenAI(api_key=api_key, base_url=base_url)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CompletionService":
        settings = settings or default_settings
        return cls(
            api_key=settings.groq_api_key,
            base_url=settings.completion_base_url,
            model=settings.completion_model,
            temperature=settings.completion_temperature,
            max_tokens=settings.completion_max_tokens
        )

    async def generate(self, prompt: str) -> str:
        """Send a single user prompt and return the generated text ("" if none)"""
        logger.info(f"Requesting completion from {self.model} ({len(prompt)} prompt chars)")

        try:
            completion = await self.client.chat.completions.create(
                messages=[{"role": "user", "content": prompt}],
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens
            )
        except openai.OpenAIError as e:
            logger.error(f"Completion request failed: {e}")
            raise CompletionServiceError(f"Completion request failed: {e}") from e

        if not completion.choices:
            logger.warning("Completion returned no choices")
            return ""

        return completion.choices[0].message.content or ""

    async def close(self):
        await self.client.close()
