import json
import os
import pathlib
import tempfile
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .log import log_line

def load_json(path: pathlib.Path, default: Any) -> Any:
    """Load JSON safely.
    If file is missing or invalid JSON, return default.
    """
    try:
        if not path.exists():
            return default
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        log_line(f"LOAD_JSON WARN | path={path} | err={e!r}", "WARN")
        return default

def _discard_temp(fd: Optional[int], tmp_name: Optional[str]) -> None:
    # Cleanup problems are reported but never mask the error that got us here
    if fd is not None:
        try:
            os.close(fd)
        except OSError as e:
            log_line(f"TEMP CLEANUP WARN | close {tmp_name} | err={e!r}", "WARN")
    if tmp_name:
        try:
            Path(tmp_name).unlink(missing_ok=True)
        except OSError as e:
            log_line(f"TEMP CLEANUP WARN | unlink {tmp_name} | err={e!r}", "WARN")

def atomic_write_chunks(
    path: Union[str, pathlib.Path],
    chunks: Iterable[bytes],
    prefix: str = "temp-",
    expected_size: Optional[int] = None,
) -> int:
    """
    Atomic binary write: chunks go to a unique temp file in the destination
    directory, which is fsynced, closed and only then renamed onto `path`.
    Raises EOFError if fewer than `expected_size` bytes arrived; in that case
    (and on any other failure) the temp file is removed and `path` is left as it was.
    Returns the number of bytes written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=prefix, dir=str(path.parent))
        written = 0
        with os.fdopen(fd, "wb") as f:
            fd = None
            for chunk in chunks:
                if not chunk:
                    continue
                f.write(chunk)
                written += len(chunk)
            f.flush()
            os.fsync(f.fileno())
        if expected_size is not None and written != expected_size:
            raise EOFError(f"short body: got {written} of {expected_size} bytes")
        os.replace(tmp_name, path)
        tmp_name = None
        return written
    finally:
        _discard_temp(fd, tmp_name)

def save_json(path: Union[str, pathlib.Path], obj: Any) -> None:
    """
    Atomic JSON write, 2-space indent, non-ASCII and HTML characters kept as-is.
    Important: temp file MUST be unique (overlapping runs can cause .tmp collisions).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = json.dumps(obj, ensure_ascii=False, indent=2)
    if not data.endswith("\n"):
        data += "\n"

    fd = None
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=str(path.parent))
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fd = None
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    finally:
        _discard_temp(fd, tmp_name)
