from pathlib import Path
from typing import Dict, Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .. import __version__
from ..utils.files import load_json
from .errors import ConfigError
from .constants import (
    CONFIG_FILE, DATA_FILE, IMAGES_DIR, README_FILE, REQUEST_TIMEOUT_S, DEFAULT_TIMEZONE,
)

DEFAULTS: Dict[str, Any] = {
    "data_path": DATA_FILE,
    "images_dir": IMAGES_DIR,
    "readme_path": README_FILE,
    "timezone": DEFAULT_TIMEZONE,
    "request_timeout_s": REQUEST_TIMEOUT_S,
    "user_agent": f"ProjectCatalogSync/{__version__}",
    "log_dir": None,
}

def load_config(root: Path, cfg_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read config.json (optional) and merge it over DEFAULTS.
    Relative paths are resolved against `root`. Unusable timeout or timezone
    values raise ConfigError.
    """
    cfg_path = cfg_path or (root / CONFIG_FILE)
    raw = load_json(cfg_path, {})
    if not isinstance(raw, dict):
        raw = {}

    cfg = dict(DEFAULTS)
    cfg.update({k: v for k, v in raw.items() if v is not None})

    cfg["root"] = root
    for key in ("data_path", "images_dir", "readme_path", "log_dir"):
        if cfg.get(key):
            p = Path(cfg[key])
            cfg[key] = p if p.is_absolute() else root / p
    try:
        cfg["request_timeout_s"] = float(cfg.get("request_timeout_s") or REQUEST_TIMEOUT_S)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"request_timeout_s must be a number, got {cfg['request_timeout_s']!r}") from e
    if cfg["request_timeout_s"] <= 0:
        raise ConfigError(f"request_timeout_s must be positive, got {cfg['request_timeout_s']}")
    try:
        ZoneInfo(cfg["timezone"])
    except (ZoneInfoNotFoundError, TypeError, ValueError) as e:
        raise ConfigError(f"unknown timezone {cfg['timezone']!r}") from e
    return cfg
