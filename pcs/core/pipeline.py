import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional
from zoneinfo import ZoneInfo

from .. import __version__
from .errors import CatalogError, ConfigError, DocumentError
from .models import SyncResult
from .config import load_config
from ..domain.catalog import load_catalog, save_catalog
from ..domain.enrichment import enrich_catalog
from ..domain.readme import stamp_document
from ..utils.log import log_line, setup_log_paths

def images_dir_for_catalog(images_dir: Path, catalog_dir: Path) -> str:
    """images_dir as a POSIX path relative to the catalog's directory (may start with ../)."""
    try:
        return Path(os.path.relpath(images_dir, catalog_dir)).as_posix()
    except ValueError:
        # no relative path exists (different drive): keep absolute
        return Path(images_dir).as_posix()

def run_sync(cfg: Dict[str, Any], now: Optional[datetime] = None) -> SyncResult:
    """
    One full run: load catalog -> enrich -> save -> stamp document.
    CatalogError / DocumentError propagate to the caller; the document is
    only stamped after the catalog was saved.
    """
    data_path = Path(cfg["data_path"])
    tz = ZoneInfo(cfg["timezone"])
    catalog_dir = data_path.parent

    catalog = load_catalog(data_path)
    log_line(f"CATALOG LOADED | path={data_path} entries={len(catalog)}")

    result = enrich_catalog(
        catalog,
        catalog_dir,
        images_dir=images_dir_for_catalog(Path(cfg["images_dir"]), catalog_dir),
        timeout=cfg.get("request_timeout_s"),
        user_agent=cfg.get("user_agent"),
    )

    save_catalog(data_path, catalog)
    log_line(f"CATALOG SAVED | path={data_path}")

    stamp_document(Path(cfg["readme_path"]), now=now, tz=tz)

    log_line(
        f"SYNC DONE | total={result.total} matched={result.matched} "
        f"enriched={result.enriched} skipped={result.skipped} errors={len(result.errors)}"
    )
    return result

def main(root: Optional[Path] = None) -> int:
    root = Path(root or ".").resolve()
    try:
        cfg = load_config(root)
    except ConfigError as e:
        log_line(f"CONFIG ERROR | {e}", "ERROR")
        raise SystemExit(1)
    setup_log_paths(cfg.get("log_dir"))

    log_line(f"SYNC STARTED (v{__version__}) | root={root}")

    try:
        run_sync(cfg)
    except CatalogError as e:
        log_line(f"CATALOG ERROR | {e}", "ERROR")
        raise SystemExit(1)
    except DocumentError as e:
        log_line(f"DOCUMENT ERROR | {e}", "ERROR")
        raise SystemExit(1)
    return 0
