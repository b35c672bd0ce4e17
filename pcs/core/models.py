from dataclasses import dataclass, field, replace
from typing import List, Dict, Any

from .errors import CatalogError

_STR_FIELDS = ("name", "description", "image", "link", "status")

@dataclass
class CatalogEntry:
    name: str = ""
    description: str = ""
    image: str = ""
    link: str = ""
    status: str = ""
    languages: List[str] = field(default_factory=list)
    # unknown keys from the input object, written back untouched
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, key: str, raw: Any) -> "CatalogEntry":
        if not isinstance(raw, dict):
            raise CatalogError(f"entry {key!r} is not an object")
        values: Dict[str, Any] = {}
        for name in _STR_FIELDS:
            v = raw.get(name)
            if v is None:
                continue
            if not isinstance(v, str):
                raise CatalogError(f"entry {key!r}: field {name!r} must be a string")
            values[name] = v
        langs = raw.get("languages")
        if langs is not None:
            if not isinstance(langs, list) or not all(isinstance(x, str) for x in langs):
                raise CatalogError(f"entry {key!r}: field 'languages' must be a list of strings")
            values["languages"] = list(langs)
        known = set(_STR_FIELDS) | {"languages"}
        values["extra"] = {k: v for k, v in raw.items() if k not in known}
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Fixed field order; status/languages omitted when empty."""
        out: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "link": self.link,
        }
        if self.status:
            out["status"] = self.status
        if self.languages:
            out["languages"] = list(self.languages)
        for k, v in self.extra.items():
            out[k] = v
        return out

    def with_updates(self, **changes: Any) -> "CatalogEntry":
        return replace(self, **changes)

@dataclass
class SyncResult:
    total: int = 0
    matched: int = 0
    enriched: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)
