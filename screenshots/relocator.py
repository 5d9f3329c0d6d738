"""Move screenshots into ``twitch-screenshots/<channel>`` beside the original.

This module exposes `move_file`, which moves a screenshot either right away or
after a settle delay on a background timer.
"""
from __future__ import annotations

import logging
import os
import shutil
import threading
from typing import Optional

from screenshots.classifier import channel_name

SAVE_TO = "twitch-screenshots"

# Seconds to wait before moving a freshly created file so the writer can finish
SETTLE_SECONDS = 2.0

_default_logger = logging.getLogger("screenshot_mover")


def destination_for(path: str) -> str:
    """Return ``<parent>/twitch-screenshots/<channel>/<filename>`` for `path`."""
    parent_dir = os.path.dirname(path)
    if not parent_dir:
        raise ValueError(f"File has no parent directory: {path}")
    filename = os.path.basename(path)
    return os.path.join(parent_dir, SAVE_TO, channel_name(filename), filename)


def _move(path: str, dest: str) -> None:
    # shutil.move would nest the file inside an existing directory of the same name
    if os.path.isdir(dest):
        raise IsADirectoryError(f"Destination is a directory: {dest}")
    shutil.move(path, dest)


def _rename(path: str, dest: str, logger: logging.Logger) -> None:
    try:
        _move(path, dest)
    except OSError:
        logger.exception("Failed to move file %s", path)
    else:
        logger.info("File moved to: %s", dest)


def move_file(
    path: str,
    delayed: bool = False,
    logger: Optional[logging.Logger] = None,
    settle_seconds: float = SETTLE_SECONDS,
) -> Optional[threading.Timer]:
    """Move the screenshot at `path` into its channel directory.

    - Creates the channel directory if needed.
    - Keeps the original filename.
    - With `delayed`, schedules the move `settle_seconds` later and returns the
      started timer; move errors are only logged. Otherwise moves now and lets
      OSError propagate.
    """
    logger = logger or _default_logger
    dest = destination_for(path)
    os.makedirs(os.path.dirname(dest), exist_ok=True)

    if delayed:
        timer = threading.Timer(settle_seconds, _rename, args=(path, dest, logger))
        timer.start()
        return timer

    _move(path, dest)
    logger.info("File moved to: %s", dest)
    return None
