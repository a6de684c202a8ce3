"""Load 3a art files."""

import logging
from pathlib import Path

from art3a.codec.parser import parse_text
from art3a.core.art import Art
from art3a.errors import ArtIOError

logger = logging.getLogger(__name__)


def load(path: str | Path, encoding: str = "utf-8") -> Art:
    """
    Load a 3a art file from disk.

    Both the modern and the legacy dialect are accepted; the dialect is
    detected from the first line.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except OSError as err:
        raise ArtIOError(f"cannot read {path}: {err}") from err
    except UnicodeDecodeError as err:
        raise ArtIOError(f"{path} is not valid {encoding} text: {err}") from err
    logger.debug("Read %d characters from %s", len(text), path)
    return parse_text(text)


def loads(text: str) -> Art:
    """Parse a 3a art from a string."""
    return parse_text(text)
