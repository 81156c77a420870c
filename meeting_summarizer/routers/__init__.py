"""
Routers package initialization
"""

from .health import router as health_router
from .transcripts import router as transcripts_router
from .summaries import router as summaries_router

__all__ = [
    "health_router",
    "transcripts_router",
    "summaries_router"
]
