"""Transcript store used by the bot and the router."""

import logging
import sqlite3
from typing import Optional, Sequence

from ..errors import TranscriptStoreError
from .database import append_transcript, find_transcript, init_database, upsert_transcript
from .models import TranscriptEntry

logger = logging.getLogger(__name__)


class TranscriptStore:
    """
    Keyed access to conversation transcripts.

    Wraps the SQLite functions. Any sqlite3 failure, or a stored row that no
    longer decodes, becomes a TranscriptStoreError so callers can treat
    persistence as best effort.
    """

    def __init__(self, db_path: str, timeout: float = 30):
        self.db_path = db_path
        self.timeout = timeout

    def initialize(self) -> None:
        try:
            init_database(self.db_path, self.timeout)
        except (sqlite3.Error, ValueError) as e:
            raise TranscriptStoreError(f"Cannot initialize transcript store: {e}") from e

    def find(self, conversation_id: str) -> Optional[TranscriptEntry]:
        try:
            return find_transcript(self.db_path, conversation_id, self.timeout)
        except (sqlite3.Error, ValueError) as e:
            raise TranscriptStoreError(
                f"Cannot read transcript for {conversation_id}: {e}"
            ) from e

    def upsert(self, conversation_id: str, lines: Sequence[str]) -> None:
        try:
            upsert_transcript(self.db_path, conversation_id, lines, self.timeout)
        except (sqlite3.Error, ValueError) as e:
            raise TranscriptStoreError(
                f"Cannot write transcript for {conversation_id}: {e}"
            ) from e

    def append(self, conversation_id: str, lines: Sequence[str]) -> TranscriptEntry:
        try:
            return append_transcript(self.db_path, conversation_id, lines, self.timeout)
        except (sqlite3.Error, ValueError) as e:
            raise TranscriptStoreError(
                f"Cannot append to transcript for {conversation_id}: {e}"
            ) from e
