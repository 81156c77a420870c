"""
Dependency providers resolving per-application services from app.state
"""

from fastapi import Request

from .services.storage import Storage
from .services.summary_service import SummaryService


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_summary_service(request: Request) -> SummaryService:
    return request.app.state.summary_service
