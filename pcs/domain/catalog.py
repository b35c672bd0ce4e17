import json
from pathlib import Path
from typing import Dict

from ..core.errors import CatalogError
from ..core.models import CatalogEntry
from ..utils.files import save_json

Catalog = Dict[str, CatalogEntry]

def load_catalog(path: Path) -> Catalog:
    """
    Read data.json into {key: CatalogEntry}, keeping key order.
    Any read or parse problem raises CatalogError: no partial catalog proceeds.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"error reading data file {path}: {e}") from e

    try:
        raw = json.loads(text)
    except ValueError as e:
        raise CatalogError(f"error parsing data file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogError(f"error parsing data file {path}: top level must be an object")

    return {str(key): CatalogEntry.from_dict(key, value) for key, value in raw.items()}

def catalog_to_json(catalog: Catalog) -> Dict[str, Dict]:
    return {key: entry.to_dict() for key, entry in catalog.items()}

def save_catalog(path: Path, catalog: Catalog) -> None:
    try:
        save_json(path, catalog_to_json(catalog))
    except (TypeError, ValueError) as e:
        raise CatalogError(f"error while encoding data: {e}") from e
    except OSError as e:
        raise CatalogError(f"error writing to file {path}: {e}") from e
