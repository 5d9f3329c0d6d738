"""Screenshot package for the screenshot mover.

Keep the filename heuristic and the move logic here so the watcher remains small and testable.
"""

from screenshots.classifier import channel_name, is_screenshot
from screenshots.relocator import SAVE_TO, SETTLE_SECONDS, destination_for, move_file

__all__ = [
    "SAVE_TO",
    "SETTLE_SECONDS",
    "channel_name",
    "destination_for",
    "is_screenshot",
    "move_file",
]
