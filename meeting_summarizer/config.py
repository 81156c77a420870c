"""
Configuration settings for the Meeting Summarizer API
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import os
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Placeholders keep the clients constructible when no credentials are set.
# They let the app start; they never let a request succeed.
PLACEHOLDER_API_KEY = "default_key"
PLACEHOLDER_SMTP_USER = "default_user"
PLACEHOLDER_SMTP_PASS = "default_pass"
DEFAULT_SENDER = "noreply@example.com"


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    app_name: str = "Meeting Summarizer API"
    api_version: str = "1.0.0"
    api_prefix: str = Field(default="/api")
    debug_mode: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default="logs/api.log")
    cors_origins: List[str] = ["*"]

    # Completion service (Groq exposes an OpenAI-compatible API)
    groq_api_key: Optional[str] = None
    completion_base_url: str = Field(default="https://api.groq.com/openai/v1")
    completion_model: str = Field(default="llama-3.3-70b-versatile")
    completion_temperature: float = Field(default=0.3)
    completion_max_tokens: int = Field(default=2048)

    # SMTP Configuration
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587)
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    smtp_sender: Optional[str] = None
    smtp_use_tls: bool = Field(default=True)

    # Upload Configuration
    max_upload_size_mb: int = Field(default=10)

    def __init__(self, **data):
        super().__init__(**data)

        # Legacy variable names used by older deployments
        if not self.groq_api_key:
            self.groq_api_key = os.getenv("GROQ_API_KEY_ENV_VAR") or PLACEHOLDER_API_KEY

        if not self.smtp_sender:
            self.smtp_sender = self.smtp_user or os.getenv("EMAIL_USER") or DEFAULT_SENDER

        if not self.smtp_user:
            self.smtp_user = os.getenv("EMAIL_USER") or PLACEHOLDER_SMTP_USER

        if not self.smtp_pass:
            self.smtp_pass = os.getenv("EMAIL_PASS") or PLACEHOLDER_SMTP_PASS

    @property
    def completion_configured(self) -> bool:
        return self.groq_api_key != PLACEHOLDER_API_KEY

    @property
    def smtp_configured(self) -> bool:
        return self.smtp_user != PLACEHOLDER_SMTP_USER and self.smtp_pass != PLACEHOLDER_SMTP_PASS


# Global settings instance
settings = Settings()

# Supported upload types
SUPPORTED_TRANSCRIPT_TYPES = {
    'text/plain': 'txt',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': 'docx'
}

DEFAULT_SUMMARY_INSTRUCTIONS = (
    "Summarize the following meeting transcript in a clear, organized format "
    "with key discussion points and action items."
)

AI_DISCLAIMER = "This summary was generated using AI and may require review."
