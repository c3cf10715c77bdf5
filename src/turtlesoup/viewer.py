"""Saving rendered drawings and opening them in the system viewer."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# Tried in order: macOS, Windows, Linux
OPEN_COMMANDS = [
    ["open"],
    ["cmd", "/c", "start", ""],
    ["xdg-open"],
]


def save_document(content: str, filename: str | Path = "output.html") -> Path:
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def open_in_browser(filename: str | Path = "output.html") -> bool:
    """Open `filename` with the platform's default handler.

    Returns False when no opener worked; never raises for a failed open.
    """
    target = str(filename)
    for command in OPEN_COMMANDS:
        try:
            subprocess.run([*command, target], check=True, capture_output=True)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("Opener %s failed: %s", command[0], e)
            continue
        logger.debug("Opened %s with %s", target, command[0])
        return True

    logger.warning("Could not open %s automatically", target)
    return False
