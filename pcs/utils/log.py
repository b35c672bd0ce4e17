import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Any
from .time import TZ_BANGKOK

# Set by setup_log_paths(); None means stdout only
LOG_DIR: Optional[Path] = None
SYNC_LOG_PATH: Optional[Path] = None

_LOG_LOCK = threading.Lock()

def setup_log_paths(log_dir: Optional[Path], log_name: str = "sync") -> None:
    global LOG_DIR, SYNC_LOG_PATH
    if log_dir is None:
        LOG_DIR = None
        SYNC_LOG_PATH = None
        return
    LOG_DIR = Path(log_dir)
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now(TZ_BANGKOK).strftime("%Y-%m-%d")
    SYNC_LOG_PATH = LOG_DIR / f"{log_name}-{date_str}.log"

def _append(path: Path, line: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(line + "\n")

def log_line(msg: Any, level: str = "INFO") -> None:
    """
    Logging wrapper (single timestamp, readable):
    - Prefix every line with: YYYY-MM-DD // HH:MM:SS+07:00 - LEVEL |
    - Also appended to SYNC_LOG_PATH when log paths are set up.
    """
    line = str(msg).strip()

    with _LOG_LOCK:
        ts = datetime.now(TZ_BANGKOK)
        prefix = ts.strftime("%Y-%m-%d // %H:%M:%S%z")
        if len(prefix) >= 5:
            prefix = prefix[:-2] + ":" + prefix[-2:]

        full = f"{prefix} - {level} | {line}" if line else f"{prefix} - {level} |"

        if SYNC_LOG_PATH:
            _append(SYNC_LOG_PATH, full)

        print(full, flush=True)
