"""Exceptions raised by the catalog sync run."""


class SyncError(Exception):
    """Base exception for sync failures."""


class CatalogError(SyncError):
    """Raised when the catalog file cannot be loaded, encoded or written. Fatal."""


class DocumentError(SyncError):
    """Raised when the companion document cannot be read or written. Fatal for the stamp step."""


class DownloadError(SyncError):
    """Raised when a preview image could not be fetched or stored. Recoverable per entry."""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MetadataError(SyncError):
    """Raised when repository metadata could not be fetched. Recoverable per entry."""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(SyncError):
    """Raised when config.json holds a value the run cannot use. Fatal."""
