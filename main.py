"""
Main entry point for the Meeting Summarizer API
This file allows running the application with 'uvicorn main:app'
"""

from meeting_summarizer.main import app

# Re-export the FastAPI app instance for uvicorn
__all__ = ["app"]
