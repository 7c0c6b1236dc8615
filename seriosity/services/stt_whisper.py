from __future__ import annotations

import logging
import mimetypes
import os
import tempfile
from functools import partial
from typing import Any, Callable, Dict

from openai import OpenAI

from seriosity.core.config import MEDIA_EXTENSIONS, base_media_type
from seriosity.core.errors import TranscriptionFailure


logger = logging.getLogger(__name__)

MIN_TRANSCRIPT_CHARS = 10

Transcriber = Callable[[bytes, str], str]


def transcribe_buffer(media_bytes: bytes, media_type: str, cfg_transcription: Dict[str, Any]) -> str:
    provider = (cfg_transcription.get("provider") or "openai").lower()
    logger.info(
        "Transcribing %d bytes of %s with provider %s", len(media_bytes), media_type, provider
    )
    try:
        if provider in {"faster_whisper", "local"}:
            text = _transcribe_faster_whisper(media_bytes, media_type, cfg_transcription)
        else:
            text = _transcribe_openai(media_bytes, media_type, cfg_transcription)
    except Exception as exc:
        raise TranscriptionFailure(f"Transcription failed: {exc}") from exc

    text = (text or "").strip()
    if len(text) < MIN_TRANSCRIPT_CHARS:
        raise TranscriptionFailure(
            f"Transcription failed or audio is too short ({len(text)} characters)"
        )
    return text


def make_transcriber(cfg_transcription: Dict[str, Any]) -> Transcriber:
    return partial(transcribe_buffer, cfg_transcription=cfg_transcription)


def _upload_name(media_type: str) -> str:
    base = base_media_type(media_type)
    extension = MEDIA_EXTENSIONS.get(base) or mimetypes.guess_extension(base) or ".webm"
    return f"interview{extension}"


def _transcribe_openai(media_bytes: bytes, media_type: str, cfg_transcription: Dict[str, Any]) -> str:
    client = OpenAI(timeout=float(cfg_transcription.get("timeout_sec", 120)))
    transcription = client.audio.transcriptions.create(
        model=cfg_transcription.get("model", "whisper-1"),
        file=(_upload_name(media_type), media_bytes, media_type),
        response_format="text",
        language=cfg_transcription.get("language", "en"),
        prompt=cfg_transcription.get("prompt") or None,
    )
    return transcription.text if hasattr(transcription, "text") else str(transcription)


def _transcribe_faster_whisper(
    media_bytes: bytes, media_type: str, cfg_transcription: Dict[str, Any]
) -> str:
    from faster_whisper import WhisperModel

    model = WhisperModel(
        cfg_transcription.get("model", "base"),
        device=cfg_transcription.get("device", "cpu"),
        compute_type=cfg_transcription.get("compute_type", "int8"),
    )

    suffix = os.path.splitext(_upload_name(media_type))[1]
    with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as tmp:
        tmp.write(media_bytes)
        tmp_path = tmp.name
    try:
        segments, _info = model.transcribe(
            tmp_path,
            language=cfg_transcription.get("language"),
            initial_prompt=cfg_transcription.get("prompt") or None,
        )
        return "".join(seg.text for seg in segments)
    finally:
        os.unlink(tmp_path)
