from datetime import datetime
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import RE_LAST_UPDATED, LAST_UPDATED_PREFIX
from ..core.errors import DocumentError
from ..utils.log import log_line
from ..utils.time import TZ_BANGKOK, format_stamp

def apply_stamp(text: str, stamp: str) -> str:
    """Replace the first 'Last Updated:' line, or append one if there is none."""
    line = LAST_UPDATED_PREFIX + stamp
    if RE_LAST_UPDATED.search(text):
        return RE_LAST_UPDATED.sub(lambda _m: line, text, count=1)
    eol = "\r\n" if "\r\n" in text else "\n"
    if text and not text.endswith("\n"):
        text += eol
    return text + line + eol

def stamp_document(path: Path, now: Optional[datetime] = None, tz: ZoneInfo = TZ_BANGKOK) -> str:
    """
    Rewrite the 'Last Updated: <timestamp>' line of the document at `path`.
    Everything else, line endings included, is written back as read.
    Returns the stamp written. Raises DocumentError on read/write failure.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"error reading {path.name}: {e}") from e

    stamp = format_stamp(now, tz)
    if not RE_LAST_UPDATED.search(text):
        log_line(f"STAMP | no existing 'Last Updated' line in {path.name}, adding one")

    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(apply_stamp(text, stamp))
    except OSError as e:
        raise DocumentError(f"failed to write {path.name}: {e}") from e

    log_line(f"STAMP OK | {path.name} | {LAST_UPDATED_PREFIX}{stamp}")
    return stamp
