"""Save 3a art files."""

import copy
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from art3a.codec.writer import format_art
from art3a.errors import ArtIOError

if TYPE_CHECKING:
    from art3a.core.art import Art

logger = logging.getLogger(__name__)


def dumps(art: "Art", strip_comments: bool = False) -> str:
    """Format an art as a modern 3a document."""
    if strip_comments:
        art = copy.deepcopy(art)
        art.strip_comments()
    return format_art(art)


def save(
    art: "Art",
    path: str | Path,
    strip_comments: bool = False,
    encoding: str = "utf-8",
) -> None:
    """
    Save an art to disk in the modern dialect.

    Legacy documents are upgraded on the way.
    """
    path = Path(path)
    text = dumps(art, strip_comments=strip_comments)
    try:
        with open(path, "w", encoding=encoding, newline="\n") as f:
            f.write(text)
    except OSError as err:
        raise ArtIOError(f"cannot write {path}: {err}") from err
    logger.debug("Wrote %d frames to %s", art.frames(), path)
