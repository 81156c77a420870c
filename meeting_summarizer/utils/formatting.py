"""
Text helpers for word counts, completion prompts and email bodies
"""

import html
from typing import Optional

from ..config import AI_DISCLAIMER


def count_words(content: str) -> str:
    """Number of whitespace-separated words in content, as stored on a Summary"""
    return str(len(content.split()))


def build_summary_prompt(instructions: str, transcript_content: str) -> str:
    return f"{instructions}\n\nTranscript:\n{transcript_content}"


def build_email_body(summary_content: str, message: Optional[str] = None) -> str:
    """
    Compose the plain-text email body: optional leading message, the summary
    between separator lines, then the AI disclaimer.
    """
    lead = f"{message}\n\n" if message else ""
    body = f"""
{lead}
---
{summary_content}
---

{AI_DISCLAIMER}
"""
    return body.strip()


def render_html_body(text_body: str) -> str:
    """HTML rendering of a plain-text body: escaped, newlines become <br>"""
    return html.escape(text_body).replace("\n", "<br>")
