from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Union

from seriosity.core.errors import NotFoundError, ValidationError
from seriosity.core.models import EvaluationResult, ExternalEvaluationResult


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class StoredEvaluation:
    submission_id: str
    subject_id: str
    subject_name: str
    evaluated_at: datetime
    transcript: str
    score: int
    score_explanation: str
    breakdown: dict
    flags: dict
    suggestions: List[str]
    details: dict
    offensive_excerpt: str


def init_db(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS subjects (
            subject_id TEXT PRIMARY KEY,
            display_name TEXT,
            interview_completed INTEGER DEFAULT 0,
            latest_submission_id TEXT,
            seriosity_score INTEGER,
            seriosity_breakdown TEXT,
            updated_at TEXT
        );
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS interview_evaluations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            submission_id TEXT UNIQUE,
            subject_id TEXT REFERENCES subjects(subject_id),
            media_hash TEXT UNIQUE,
            evaluated_at TEXT,
            transcript TEXT,
            score INTEGER,
            score_explanation TEXT,
            breakdown TEXT,
            flags TEXT,
            suggestions TEXT,
            details TEXT,
            offensive_excerpt TEXT
        );
        """
    )
    conn.commit()
    return conn


def register_subject(conn: sqlite3.Connection, subject_id: str, display_name: str = "") -> None:
    if not subject_id:
        raise ValidationError("subject_id is required")
    conn.execute(
        """
        INSERT INTO subjects (subject_id, display_name, updated_at) VALUES (?, ?, ?)
        ON CONFLICT(subject_id) DO UPDATE SET display_name = excluded.display_name
        """,
        (subject_id, display_name, datetime.now().strftime(TIMESTAMP_FORMAT)),
    )
    conn.commit()


def subject_exists(conn: sqlite3.Connection, subject_id: str) -> bool:
    cur = conn.execute("SELECT 1 FROM subjects WHERE subject_id = ? LIMIT 1", (subject_id,))
    return cur.fetchone() is not None


def has_media_hash(conn: sqlite3.Connection, media_hash: str) -> bool:
    cur = conn.execute(
        "SELECT 1 FROM interview_evaluations WHERE media_hash = ? LIMIT 1", (media_hash,)
    )
    return cur.fetchone() is not None


def has_submission(conn: sqlite3.Connection, submission_id: str) -> bool:
    cur = conn.execute(
        "SELECT 1 FROM interview_evaluations WHERE submission_id = ? LIMIT 1", (submission_id,)
    )
    return cur.fetchone() is not None


def insert_evaluation(
    conn: sqlite3.Connection,
    submission_id: str,
    subject_id: str,
    r: Union[EvaluationResult, ExternalEvaluationResult],
    media_hash: str | None = None,
    offensive_excerpt: str = "",
) -> None:
    """Store an evaluation and update the subject's latest seriosity score.

    Raises NotFoundError, without writing anything, when the subject is unknown,
    and ValidationError when the submission id or media hash is already stored.
    """
    if not submission_id or not subject_id:
        raise ValidationError("submission_id and subject_id are required")
    if not subject_exists(conn, subject_id):
        raise NotFoundError(f"Subject {subject_id!r} not found")
    if has_submission(conn, submission_id):
        raise ValidationError(f"Submission {submission_id!r} was already evaluated")

    payload = r.to_dict()
    now = datetime.now().strftime(TIMESTAMP_FORMAT)
    breakdown = json.dumps(payload["breakdown"], ensure_ascii=False)
    try:
        with conn:
            conn.execute(
                """
                INSERT INTO interview_evaluations (
                    submission_id, subject_id, media_hash, evaluated_at, transcript,
                    score, score_explanation, breakdown, flags, suggestions, details,
                    offensive_excerpt
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    submission_id,
                    subject_id,
                    media_hash,
                    now,
                    payload["transcript"],
                    payload["score"],
                    payload["scoreExplanation"],
                    breakdown,
                    json.dumps(payload.get("flags", {}), ensure_ascii=False),
                    json.dumps(payload.get("suggestions", []), ensure_ascii=False),
                    json.dumps(payload["details"], ensure_ascii=False),
                    offensive_excerpt,
                ),
            )
            conn.execute(
                """
                UPDATE subjects SET
                    interview_completed = 1,
                    latest_submission_id = ?,
                    seriosity_score = ?,
                    seriosity_breakdown = ?,
                    updated_at = ?
                WHERE subject_id = ?
                """,
                (submission_id, payload["score"], breakdown, now, subject_id),
            )
    except sqlite3.IntegrityError as exc:
        raise ValidationError(
            f"Submission {submission_id!r} or its media is already stored"
        ) from exc


def _subject_filter(subject_filter: str | None) -> tuple[str, list]:
    if not subject_filter:
        return "", []
    nf = f"%{subject_filter}%"
    return "WHERE e.subject_id LIKE ? OR s.display_name LIKE ?", [nf, nf]


_SELECT_EVALUATIONS = """
    SELECT
        e.submission_id, e.subject_id, s.display_name, e.evaluated_at, e.transcript,
        e.score, e.score_explanation, e.breakdown, e.flags, e.suggestions, e.details,
        e.offensive_excerpt
    FROM interview_evaluations e
    LEFT JOIN subjects s ON s.subject_id = e.subject_id
"""


def _row_to_stored(r: tuple) -> StoredEvaluation:
    return StoredEvaluation(
        submission_id=r[0],
        subject_id=r[1],
        subject_name=r[2] or "",
        evaluated_at=datetime.strptime(r[3], TIMESTAMP_FORMAT),
        transcript=r[4] or "",
        score=int(r[5] or 0),
        score_explanation=r[6] or "",
        breakdown=json.loads(r[7] or "{}"),
        flags=json.loads(r[8] or "{}"),
        suggestions=json.loads(r[9] or "[]"),
        details=json.loads(r[10] or "{}"),
        offensive_excerpt=r[11] or "",
    )


def get_evaluation(conn: sqlite3.Connection, submission_id: str) -> StoredEvaluation:
    cur = conn.execute(_SELECT_EVALUATIONS + " WHERE e.submission_id = ?", (submission_id,))
    row = cur.fetchone()
    if row is None:
        raise NotFoundError(f"Evaluation for submission {submission_id!r} not found")
    return _row_to_stored(row)


def list_evaluations(
    conn: sqlite3.Connection, limit: int = 200, offset: int = 0, subject_filter: str | None = None
) -> List[StoredEvaluation]:
    where, params = _subject_filter(subject_filter)
    cur = conn.execute(
        f"{_SELECT_EVALUATIONS} {where} ORDER BY e.id DESC LIMIT ? OFFSET ?",
        (*params, limit, offset),
    )
    return [_row_to_stored(r) for r in cur.fetchall()]


def count_evaluations(conn: sqlite3.Connection, subject_filter: str | None = None) -> int:
    where, params = _subject_filter(subject_filter)
    cur = conn.execute(
        f"""
        SELECT COUNT(1) FROM interview_evaluations e
        LEFT JOIN subjects s ON s.subject_id = e.subject_id
        {where}
        """,
        params,
    )
    return int(cur.fetchone()[0])
