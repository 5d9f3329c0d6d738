"""Filename heuristics for Twitch screenshots.

Twitch names captures like ``<channel>_Sat-Jan-18-2025_1_06_05-PM.png``, with an
optional ``(1)`` counter when the browser saves a duplicate. The channel part
may itself contain underscores.
"""
from __future__ import annotations

import os

EXTENSION = ".png"
DELIMITER = "_"

# channel name can have _ in it, so this is a minimum rather than an exact count
MIN_SEGMENTS = 5


def is_screenshot(path: str) -> bool:
    """Return True if the filename of `path` looks like a Twitch screenshot.

    Only the name is inspected; the file is never opened.
    """
    filename = os.path.basename(path)

    if not filename.endswith(EXTENSION):
        return False
    filename = filename[: -len(EXTENSION)]

    parts = filename.split(DELIMITER)
    if len(parts) < MIN_SEGMENTS:
        return False

    time = DELIMITER.join(parts[-3:])
    date = parts[-4]

    # Sat-Jan-18-2025
    if len(date) != 15 or len(date.split("-")) != 4:
        return False

    # drop a duplicate counter such as (1) or (2)
    time = time.split("(")[0]
    # 1_06_05-PM or 12_06_05-AM
    if len(time) in (10, 11) and len(time.split(DELIMITER)) != 3:
        return False

    return True


def channel_name(filename: str) -> str:
    """Return the channel part of a screenshot filename.

    Only call this on names `is_screenshot` accepted.
    """
    parts = filename.split(DELIMITER)
    if len(parts) < MIN_SEGMENTS:
        raise ValueError(f"Not a screenshot filename: {filename!r}")
    return DELIMITER.join(parts[:-4])
