from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import List

from seriosity.core.config import (
    MEDIA_TYPES,
    AppConfig,
    is_valid_filename,
    media_type_for,
    parse_submission_filename,
)
from seriosity.core.errors import EvaluationError
from seriosity.services.db import (
    StoredEvaluation,
    get_evaluation,
    has_media_hash,
    has_submission,
    insert_evaluation,
)
from seriosity.services.evaluation_engine import evaluate_interview
from seriosity.services.export_excel import default_report_path, export_to_excel
from seriosity.services.profanity import detect_profanity
from seriosity.services.stt_whisper import Transcriber


logger = logging.getLogger(__name__)


def _move(path: Path, folder: Path) -> Path:
    """Move a recording out of the inbox, replacing an older file of the same name."""
    folder.mkdir(parents=True, exist_ok=True)
    target = folder / path.name
    path.replace(target)
    return target


def process_file(path: Path, cfg: AppConfig, db_conn, transcribe: Transcriber) -> StoredEvaluation | None:
    if not is_valid_filename(path.name):
        logger.warning("Rejected %s: file name does not match <subject>__<submission>.<ext>", path.name)
        _move(path, cfg.invalid_dir)
        return None

    size = path.stat().st_size
    if size > cfg.max_media_bytes:
        logger.warning("Rejected %s: %d bytes is over the %d byte limit", path.name, size, cfg.max_media_bytes)
        _move(path, cfg.invalid_dir)
        return None

    media = path.read_bytes()
    media_hash = hashlib.sha256(media).hexdigest()
    if has_media_hash(db_conn, media_hash):
        logger.info("Skipped %s: recording already evaluated", path.name)
        _move(path, cfg.processed_dir)
        return None

    subject_id, submission_id = parse_submission_filename(path.name)
    if has_submission(db_conn, submission_id):
        logger.warning("Rejected %s: submission %s already has an evaluation", path.name, submission_id)
        _move(path, cfg.invalid_dir)
        return None

    try:
        result = evaluate_interview(
            media, media_type_for(path), transcribe, max_media_bytes=cfg.max_media_bytes
        )
        _, _, excerpt = detect_profanity(result.transcript)
        insert_evaluation(
            db_conn, submission_id, subject_id, result, media_hash=media_hash, offensive_excerpt=excerpt
        )
    except EvaluationError as exc:
        logger.error("Failed to evaluate %s: %s", path.name, exc)
        _move(path, cfg.invalid_dir)
        return None

    _move(path, cfg.processed_dir)
    logger.info("Stored evaluation %s for %s: score %d", submission_id, subject_id, result.score)
    return get_evaluation(db_conn, submission_id)


def is_supported_media(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in MEDIA_TYPES


def run_batch(cfg: AppConfig, db_conn, transcribe: Transcriber) -> Path | None:
    rows: List[StoredEvaluation] = []

    for path in sorted(cfg.input_dir.glob("*")):
        if not is_supported_media(path):
            continue
        res = process_file(path, cfg, db_conn, transcribe)
        if res:
            rows.append(res)

    logger.info("Batch finished: %d new evaluations", len(rows))
    if cfg.use_excel_export:
        report_path = default_report_path(cfg.reports_dir)
        export_to_excel(rows, report_path)
        return report_path

    return None
