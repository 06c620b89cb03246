"""
Record Store

SQLite persistence for users and their job applications.

Schema Overview:
- users: one row per external identity (created on first sight)
- job_applications: application records, each owned by one user

Every application operation is scoped to its owner; records belonging to
another user behave exactly like records that do not exist.
"""

import sqlite3
import uuid
from contextlib import contextmanager
from datetime import date, datetime, timezone
from pathlib import Path
from typing import List, Optional

from job_tracker_ai.config import DATABASE_PATH
from job_tracker_ai.errors import RecordNotFoundError
from job_tracker_ai.schemas.application import JobApplication, JobApplicationCreate, JobApplicationUpdate
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Columns that may never be cleared by an update
_REQUIRED_COLUMNS = ("company", "position", "status", "applied_date")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class RecordStore:
    """SQLite store for job applications keyed by owner + record id."""

    def __init__(self, db_path: str = DATABASE_PATH):
        """
        Initialize the record store.

        Args:
            db_path: Path to SQLite database file (":memory:" is not supported
                because every operation opens its own connection)
        """
        self.db_path = Path(db_path)
        self._init_database()

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager; commits on success."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_database(self):
        """Initialize database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    external_id TEXT UNIQUE NOT NULL,   -- id from the identity provider
                    email TEXT NOT NULL,
                    first_name TEXT,
                    last_name TEXT,
                    created_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS job_applications (
                    id TEXT PRIMARY KEY,                -- uuid4 hex
                    user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
                    company TEXT NOT NULL,
                    position TEXT NOT NULL,
                    location TEXT,
                    salary TEXT,
                    status TEXT NOT NULL DEFAULT 'APPLIED',
                    applied_date TEXT NOT NULL,         -- YYYY-MM-DD
                    notes TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_job_applications_user ON job_applications(user_id, created_at)"
            )
        logger.debug("Record store ready at %s", self.db_path)

    # ==================== USERS ====================

    def get_or_create_user(self, external_id: str) -> int:
        """Return the internal user id, creating a placeholder user on first use."""
        with self._get_connection() as conn:
            row = conn.execute("SELECT id FROM users WHERE external_id = ?", (external_id,)).fetchone()
            if row:
                return row["id"]
            cursor = conn.execute(
                "INSERT INTO users (external_id, email, created_at) VALUES (?, ?, ?)",
                (external_id, f"user-{external_id}@temp.com", _now()),
            )
            logger.info("Created user for external id %s", external_id)
            return cursor.lastrowid

    # ==================== APPLICATIONS ====================

    @staticmethod
    def _row_to_application(row: sqlite3.Row) -> JobApplication:
        return JobApplication(
            id=row["id"],
            company=row["company"],
            position=row["position"],
            location=row["location"],
            salary=row["salary"],
            status=row["status"],
            applied_date=date.fromisoformat(row["applied_date"]),
            notes=row["notes"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def create(self, owner_id: int, data: JobApplicationCreate) -> JobApplication:
        record_id = uuid.uuid4().hex
        now = _now()
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO job_applications
                    (id, user_id, company, position, location, salary, status,
                     applied_date, notes, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record_id,
                    owner_id,
                    data.company,
                    data.position,
                    data.location,
                    data.salary,
                    data.status,
                    data.applied_date.isoformat(),
                    data.notes,
                    now,
                    now,
                ),
            )
        logger.info("Created job application %s for user %s", record_id, owner_id)
        return self.get(owner_id, record_id)

    def get(self, owner_id: int, record_id: str) -> JobApplication:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM job_applications WHERE id = ? AND user_id = ?",
                (record_id, owner_id),
            ).fetchone()
        if row is None:
            raise RecordNotFoundError("Job application not found")
        return self._row_to_application(row)

    def list(self, owner_id: int) -> List[JobApplication]:
        """All of the owner's applications, newest first."""
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM job_applications WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
                (owner_id,),
            ).fetchall()
        return [self._row_to_application(row) for row in rows]

    def update(self, owner_id: int, record_id: str, data: JobApplicationUpdate) -> JobApplication:
        """Apply only the fields present in the update; required columns are never cleared."""
        changes = {}
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in _REQUIRED_COLUMNS:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            changes[field] = value

        assignments = ", ".join(f"{column} = ?" for column in changes)
        params: List[Optional[str]] = list(changes.values())
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE job_applications SET {assignments + ', ' if assignments else ''}updated_at = ? "
                "WHERE id = ? AND user_id = ?",
                (*params, _now(), record_id, owner_id),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError("Job application not found")
        logger.info("Updated job application %s (%s)", record_id, ", ".join(changes) or "no fields")
        return self.get(owner_id, record_id)

    def delete(self, owner_id: int, record_id: str) -> None:
        with self._get_connection() as conn:
            cursor = conn.execute(
                "DELETE FROM job_applications WHERE id = ? AND user_id = ?",
                (record_id, owner_id),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError("Job application not found")
        logger.info("Deleted job application %s", record_id)
