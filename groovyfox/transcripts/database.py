"""SQLite persistence for conversation transcripts."""

import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional, Sequence

from .models import TranscriptEntry

logger = logging.getLogger(__name__)


@contextmanager
def get_connection(db_path: str, timeout: float = 30):
    """Context manager for database connections."""
    conn = sqlite3.connect(db_path, timeout=timeout)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception as e:
        conn.rollback()
        logger.error(f"Database error: {e}")
        raise
    finally:
        conn.close()


def init_database(db_path: str, timeout: float = 30) -> None:
    """Initialize the database with the transcripts table.

    Args:
        db_path: Path to the SQLite database file
        timeout: Seconds to wait on a locked database
    """
    with get_connection(db_path, timeout) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS transcripts (
                conversation_id TEXT PRIMARY KEY,
                lines TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)
        logger.info(f"Transcript database initialized at {db_path}")


def find_transcript(
    db_path: str, conversation_id: str, timeout: float = 30
) -> Optional[TranscriptEntry]:
    """Get the stored transcript for a conversation.

    Args:
        db_path: Path to the SQLite database file
        conversation_id: Conversation to look up

    Returns:
        TranscriptEntry if one exists, None otherwise
    """
    with get_connection(db_path, timeout) as conn:
        row = conn.execute(
            """
            SELECT conversation_id, lines, updated_at
            FROM transcripts
            WHERE conversation_id = ?
            """,
            (conversation_id,),
        ).fetchone()

    if row is None:
        logger.debug(f"No transcript found for conversation {conversation_id}")
        return None

    return TranscriptEntry(
        conversation_id=row["conversation_id"],
        lines=json.loads(row["lines"]),
        updated_at=row["updated_at"],
    )


def upsert_transcript(
    db_path: str, conversation_id: str, lines: Sequence[str], timeout: float = 30
) -> None:
    """Create or replace the line sequence stored for a conversation.

    Args:
        db_path: Path to the SQLite database file
        conversation_id: Conversation key
        lines: Complete ordered line sequence to store
    """
    with get_connection(db_path, timeout) as conn:
        conn.execute(
            """
            INSERT INTO transcripts (conversation_id, lines, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(conversation_id) DO UPDATE SET
                lines = excluded.lines,
                updated_at = excluded.updated_at
            """,
            (
                conversation_id,
                json.dumps(list(lines)),
                datetime.now(timezone.utc).isoformat(),
            ),
        )
        logger.debug(f"Stored {len(lines)} lines for conversation {conversation_id}")


def append_transcript(
    db_path: str, conversation_id: str, lines: Sequence[str], timeout: float = 30
) -> TranscriptEntry:
    """Append lines to a conversation's transcript, creating it if missing.

    Read and write are separate statements, so two turns of the same
    conversation racing each other can lose lines (last write wins).
    Retried turns are appended again; nothing is deduplicated.

    Returns:
        The transcript as stored after the append
    """
    existing = find_transcript(db_path, conversation_id, timeout)
    current = existing.lines if existing is not None else []
    updated = [*current, *lines]
    upsert_transcript(db_path, conversation_id, updated, timeout)
    return TranscriptEntry(conversation_id=conversation_id, lines=updated)
