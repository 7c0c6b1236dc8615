from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from seriosity.core.config import load_config, media_type_for
from seriosity.core.errors import EvaluationError, ValidationError
from seriosity.core.logging_setup import setup_logging
from seriosity.pipelines.batch import run_batch
from seriosity.pipelines.watcher import run_watcher
from seriosity.services.db import init_db, register_subject
from seriosity.services.evaluation_engine import (
    evaluate_for_external_party,
    evaluate_interview,
    evaluate_transcript,
)
from seriosity.services.stt_whisper import make_transcriber


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seriosity")
    parser.add_argument("--config", default="config.yaml")
    parser.add_argument(
        "--mode",
        choices=["batch", "watch", "evaluate", "transcript", "subject"],
        default="watch",
    )
    parser.add_argument("--file", help="recording to evaluate (evaluate mode)")
    parser.add_argument("--text", help="typed answer to score (transcript mode)")
    parser.add_argument(
        "--external", action="store_true", help="print the counter-party view only"
    )
    parser.add_argument("--subject-id", help="subject to register (subject mode)")
    parser.add_argument("--name", default="", help="subject display name (subject mode)")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_config(Path(args.config))
    setup_logging(cfg.logging)

    try:
        if args.mode == "evaluate":
            if not args.file:
                raise ValidationError("--file is required in evaluate mode")
            path = Path(args.file)
            result = evaluate_interview(
                path.read_bytes(),
                media_type_for(path),
                make_transcriber(cfg.transcription),
                max_media_bytes=cfg.max_media_bytes,
            )
            payload = evaluate_for_external_party(result) if args.external else result
            print(json.dumps(payload.to_dict(), indent=2, ensure_ascii=False))
            return
        if args.mode == "transcript":
            if not args.text:
                raise ValidationError("--text is required in transcript mode")
            result = evaluate_transcript(args.text)
            payload = evaluate_for_external_party(result) if args.external else result
            print(json.dumps(payload.to_dict(), indent=2, ensure_ascii=False))
            return

        db_conn = init_db(cfg.db_path)
        if args.mode == "subject":
            register_subject(db_conn, args.subject_id or "", args.name)
            print(f"Registered subject {args.subject_id}")
        elif args.mode == "batch":
            report = run_batch(cfg, db_conn, make_transcriber(cfg.transcription))
            if report:
                print(f"Report: {report}")
            else:
                print("Batch complete (no Excel export).")
        else:
            run_watcher(cfg, db_conn, make_transcriber(cfg.transcription))
    except EvaluationError as exc:
        logger.error("%s failed: %s", args.mode, exc)
        parser.exit(1, f"{exc.user_message} ({exc})\n")


if __name__ == "__main__":
    main()
