"""
Meeting Summarizer FastAPI Backend

Accepts meeting transcripts, summarizes them with an LLM completion
service, lets the summary be edited and emails it to a list of recipients.
"""

__version__ = "1.0.0"
