"""Transcripts module - SQLite-backed conversation history."""

from .database import append_transcript, find_transcript, init_database, upsert_transcript
from .models import BOT_LABEL, TranscriptEntry, format_bot_line, format_user_line
from .store import TranscriptStore

__all__ = [
    "init_database",
    "find_transcript",
    "upsert_transcript",
    "append_transcript",
    "TranscriptEntry",
    "TranscriptStore",
    "BOT_LABEL",
    "format_bot_line",
    "format_user_line",
]
