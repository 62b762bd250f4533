# db_manager.py
"""
SQLite storage for the local job repository.
"""

import sqlite3
import logging
from contextlib import contextmanager

import config

logger = logging.getLogger(__name__)

JOBS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS local_jobs (
        id TEXT PRIMARY KEY,
        start_time TEXT NOT NULL,
        job_json TEXT NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""

def init_jobs_table(conn):
    """Create the job table on an open connection."""
    cursor = conn.cursor()
    cursor.execute(JOBS_TABLE_SQL)
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_local_jobs_start ON local_jobs (start_time)")
    conn.commit()


class DatabaseManager:
    """Owns the path of the local job database and hands out connections."""

    def __init__(self, db_file=None):
        self.db_file = db_file or config.JOBS_DB_FILE
        self._init_database()

    def _init_database(self):
        with self.get_local_connection() as conn:
            init_jobs_table(conn)
        logger.debug("Local job database ready: %s", self.db_file)

    @contextmanager
    def get_local_connection(self):
        """Get connection to the local job database"""
        conn = sqlite3.connect(self.db_file)
        try:
            yield conn
        finally:
            conn.close()


_db_manager = None

def get_db_manager():
    """Get singleton database manager instance"""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager
