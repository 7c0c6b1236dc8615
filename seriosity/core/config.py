from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

import yaml


SUBMISSION_REGEX = re.compile(
    r"^(?P<subject>[A-Za-z0-9-]+)__(?P<submission>[A-Za-z0-9-]+)"
    r"\.(?P<ext>webm|mp4|mov|mp3|wav|m4a|ogg)$",
    re.IGNORECASE,
)

MEDIA_TYPES: Dict[str, str] = {
    ".webm": "video/webm",
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".ogg": "audio/ogg",
}

# Media type -> file extension, for naming uploads; also the accepted types.
MEDIA_EXTENSIONS: Dict[str, str] = {
    **{media_type: ext for ext, media_type in MEDIA_TYPES.items()},
    "audio/webm": ".webm",
    "audio/mp3": ".mp3",
}

MAX_MEDIA_BYTES = 100 * 1024 * 1024


@dataclass
class AppConfig:
    input_dir: Path
    invalid_dir: Path
    processed_dir: Path
    reports_dir: Path
    db_path: Path
    use_excel_export: bool
    transcription: Dict[str, Any]
    watcher: Dict[str, Any]
    logging: Dict[str, Any]
    max_media_bytes: int = MAX_MEDIA_BYTES


def load_config(path: Path) -> AppConfig:
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(
        input_dir=Path(raw.get("input_dir", "data/inbox")),
        invalid_dir=Path(raw.get("invalid_dir", "data/invalid")),
        processed_dir=Path(raw.get("processed_dir", "data/processed")),
        reports_dir=Path(raw.get("reports_dir", "data/reports")),
        db_path=Path(raw.get("db_path", "data/seriosity.db")),
        use_excel_export=bool(raw.get("use_excel_export", True)),
        transcription=raw.get("transcription", {}),
        watcher=raw.get("watcher", {}),
        logging=raw.get("logging", {}),
        max_media_bytes=int(raw.get("max_media_bytes", MAX_MEDIA_BYTES)),
    )


def is_valid_filename(name: str) -> bool:
    return bool(SUBMISSION_REGEX.match(name))


def parse_submission_filename(name: str) -> tuple[str, str]:
    match = SUBMISSION_REGEX.match(name)
    if not match:
        return ("", "")
    return (match.group("subject"), match.group("submission"))


def media_type_for(path: Path) -> str:
    return MEDIA_TYPES.get(path.suffix.lower(), "")


def base_media_type(media_type: str) -> str:
    """``"video/webm;codecs=vp9"`` -> ``"video/webm"``."""
    return media_type.split(";", 1)[0].strip().lower()
