from __future__ import annotations

import logging
import time
from pathlib import Path
from threading import Lock

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from seriosity.core.config import MEDIA_TYPES, AppConfig
from seriosity.pipelines.batch import is_supported_media, process_file
from seriosity.services.stt_whisper import Transcriber


logger = logging.getLogger(__name__)


class IncomingHandler(FileSystemEventHandler):
    """Evaluates recordings as they land in the inbox.

    Browsers and upload tools often write to a temporary name and rename it
    when done, so moves into the inbox count as arrivals too.
    """

    def __init__(self, cfg: AppConfig, db_conn, transcribe: Transcriber) -> None:
        self.cfg = cfg
        self.db_conn = db_conn
        self.transcribe = transcribe
        # one sqlite connection, one recording at a time
        self.lock = Lock()

    def on_created(self, event):
        if not event.is_directory:
            self.handle(Path(event.src_path))

    def on_moved(self, event):
        if not event.is_directory:
            self.handle(Path(event.dest_path))

    def handle(self, path: Path) -> None:
        if path.suffix.lower() not in MEDIA_TYPES:
            return
        with self.lock:
            settled = wait_for_settle(
                path,
                int(self.cfg.watcher.get("settle_time_sec", 2)),
                int(self.cfg.watcher.get("max_wait_sec", 600)),
            )
            if not settled:
                if path.exists():
                    logger.warning("Left %s in the inbox: still growing, retry with --mode batch", path.name)
                return
            process_file(path, self.cfg, self.db_conn, self.transcribe)


def wait_for_settle(path: Path, settle_time_sec: int, max_wait_sec: int, poll_sec: float = 1.0) -> bool:
    """True once the file size stayed the same for ``settle_time_sec`` polls.

    False when the file disappears or keeps changing for ``max_wait_sec``.
    """
    last_size = -1
    stable_for = 0
    waited = 0.0
    while True:
        if not path.exists():
            return False
        size = path.stat().st_size
        if size == last_size:
            stable_for += 1
        else:
            stable_for = 0
            last_size = size
        if stable_for >= settle_time_sec:
            return True
        if waited >= max_wait_sec:
            return False
        time.sleep(poll_sec)
        waited += poll_sec


def run_watcher(cfg: AppConfig, db_conn, transcribe: Transcriber) -> None:
    cfg.input_dir.mkdir(parents=True, exist_ok=True)
    event_handler = IncomingHandler(cfg, db_conn, transcribe)

    # recordings that arrived while nothing was watching
    backlog = [p for p in sorted(cfg.input_dir.iterdir()) if is_supported_media(p)]
    if backlog:
        logger.info("Processing %d recordings already in %s", len(backlog), cfg.input_dir)
    for path in backlog:
        event_handler.handle(path)

    observer = Observer()
    observer.schedule(event_handler, str(cfg.input_dir), recursive=False)
    observer.start()
    logger.info("Watching %s for interview recordings", cfg.input_dir)

    try:
        while True:
            time.sleep(int(cfg.watcher.get("idle_sleep_sec", 1)))
    except KeyboardInterrupt:
        logger.info("Watcher stopped")
        observer.stop()
    observer.join()
