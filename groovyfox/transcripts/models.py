"""Pydantic models for conversation transcripts."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

BOT_LABEL = "Foxy"


class TranscriptEntry(BaseModel):
    """Ordered log of utterances for one conversation."""

    conversation_id: str
    lines: list[str] = Field(default_factory=list)
    updated_at: Optional[str] = None


def format_user_line(sender_id: str, timestamp: datetime | str, text: str) -> str:
    """Render a user utterance as a transcript line."""
    if isinstance(timestamp, datetime):
        timestamp = timestamp.isoformat()
    return f"{sender_id} at {timestamp}: {text}"


def format_bot_line(text: str, label: str = BOT_LABEL) -> str:
    """Render a bot utterance as a transcript line."""
    return f"{label}: {text}"
