"""
score_store.py: Persistence layer for the high score.
"""

import logging
import sqlite3
from typing import Dict

from .constants import DB_FILE

logger = logging.getLogger(__name__)


class ScoreStoreError(Exception):
    """Raised when the backing store cannot be read or written."""


class ScoreStore:
    """Keeps best scores in a small SQLite key-value table."""
    def __init__(self, db_file: str = DB_FILE):
        self.db_file = db_file
        try:
            self.conn = sqlite3.connect(db_file)
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error as e:
            raise ScoreStoreError(f"cannot open score database {db_file!r}: {e}") from e

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS HighScores (
                key TEXT PRIMARY KEY,
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> int:
        """Returns the stored best score for key, or 0 when absent."""
        try:
            self.cur.execute("SELECT best FROM HighScores WHERE key=?", (key,))
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            raise ScoreStoreError(f"cannot read {key!r}: {e}") from e
        return int(row[0]) if row else 0

    def save(self, key: str, score: int):
        """Stores score for key unless a higher one is already stored."""
        try:
            self.cur.execute("""
                INSERT INTO HighScores (key, best) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET best = MAX(best, excluded.best)
            """, (key, score))
            self.conn.commit()
        except sqlite3.Error as e:
            raise ScoreStoreError(f"cannot write {key!r}: {e}") from e
        logger.debug("Saved %s=%d to %s", key, score, self.db_file)

    def close(self):
        self.conn.close()


class InMemoryScoreStore:
    """Same interface as ScoreStore, kept in a dict."""
    def __init__(self):
        self.scores: Dict[str, int] = {}

    def get(self, key: str) -> int:
        return self.scores.get(key, 0)

    def save(self, key: str, score: int):
        self.scores[key] = max(self.scores.get(key, 0), score)

    def close(self):
        pass
