from __future__ import annotations

import argparse
import logging
import os
import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from screenshots import SETTLE_SECONDS, is_screenshot, move_file

try:
    from watchdog.observers import Observer
    from watchdog.events import FileSystemEventHandler
except Exception:  # watchdog not available
    print("Required package 'watchdog' is not installed. Install with: python -m pip install watchdog")
    sys.exit(1)


class ScreenshotHandler(FileSystemEventHandler):
    def __init__(self, logger: logging.Logger, settle_seconds: float = SETTLE_SECONDS) -> None:
        super().__init__()
        self.logger = logger
        self.settle_seconds = settle_seconds
        self._pending: List[threading.Timer] = []

    def on_created(self, event):
        # Ignore directories
        if event.is_directory:
            return

        path = os.fsdecode(event.src_path)
        self.logger.debug("Processing: %s", path)
        if not is_screenshot(path):
            return

        self.logger.info("Moving screenshot: %s", path)
        try:
            timer = move_file(path, delayed=True, logger=self.logger, settle_seconds=self.settle_seconds)
        except Exception:
            self.logger.exception("Error processing file %s", path)
            return

        self._pending = [t for t in self._pending if t.is_alive()]
        if timer is not None:
            self._pending.append(timer)

    def drain(self) -> None:
        """Wait for every scheduled move to finish."""
        pending, self._pending = self._pending, []
        for timer in pending:
            timer.join()


def sweep(path: str, logger: logging.Logger) -> int:
    """Move every screenshot directly inside `path`; return how many were moved.

    A directory that cannot be listed raises OSError. Failures on single files
    are logged and skipped.
    """
    moved = 0
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if not entry.is_file(follow_symlinks=False):
            continue
        if not is_screenshot(entry.path):
            continue
        logger.info("Moving screenshot: %s", entry.path)
        try:
            move_file(entry.path, delayed=False, logger=logger)
        except Exception:
            logger.exception("Error processing file %s", entry.path)
        else:
            moved += 1
    return moved


def start_sweep(path: str, logger: logging.Logger) -> Future:
    """Run `sweep` on a worker thread and return its future."""
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sweep")
    future = executor.submit(sweep, path, logger)
    executor.shutdown(wait=False)
    return future


def run_watch(
    path: str,
    logger: logging.Logger,
    settle_seconds: float = SETTLE_SECONDS,
    observer: Optional[Observer] = None,
) -> None:
    """Move new screenshots in `path` as they appear; blocks until the observer stops."""
    if not os.path.isdir(path):
        raise FileNotFoundError(f"Directory to watch does not exist: {path}")

    handler = ScreenshotHandler(logger, settle_seconds=settle_seconds)
    observer = observer or Observer()
    observer.schedule(handler, path, recursive=False)
    observer.start()

    try:
        while observer.is_alive():
            observer.join(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested, stopping observer")
        observer.stop()
        observer.join()
    handler.drain()
    logger.info("Stopped watching %s", path)


def setup_logger(logfile: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger("screenshot_mover")
    logger.setLevel(level)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    # Rotating file handler to avoid unbounded log growth
    if logfile:
        handler = RotatingFileHandler(logfile, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    return logger


LOG_FILENAME = "screenshot_mover.log"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Move Twitch screenshots into per-channel folders")
    parser.add_argument("path", help="Directory to process for Twitch screenshots")
    parser.add_argument(
        "--watch", "-w",
        action="store_true",
        help="Keep running and move new screenshots as they are created"
    )
    parser.add_argument(
        "--logdir", "-l",
        default=None,
        help=f"Directory to write {LOG_FILENAME} to (default: console only)"
    )
    parser.add_argument(
        "--settle",
        type=float,
        default=SETTLE_SECONDS,
        help=f"Seconds to wait before moving a newly created screenshot (default {SETTLE_SECONDS})"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every processed path")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    watch_path = os.path.abspath(args.path)
    logfile = None
    if args.logdir:
        log_dir = os.path.abspath(args.logdir)
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, LOG_FILENAME)

    logger = setup_logger(logfile, level=logging.DEBUG if args.verbose else logging.INFO)
    logger.info("Watching %s for new screenshots to process...", watch_path)
    logger.debug("Args were: %s", args)

    status = 0
    sweep_future = start_sweep(watch_path, logger)

    if args.watch:
        try:
            run_watch(watch_path, logger, settle_seconds=args.settle)
        except OSError:
            logger.exception("Could not watch %s", watch_path)
            status = 1

    try:
        moved = sweep_future.result()
    except KeyboardInterrupt:
        logger.info("Shutdown requested, abandoning initial sweep")
        status = 1
    except OSError:
        logger.exception("Could not read %s", watch_path)
        status = 1
    else:
        logger.info("Initial sweep moved %d screenshot(s)", moved)

    return status


if __name__ == "__main__":
    raise SystemExit(main())
