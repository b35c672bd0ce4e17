import requests
from pathlib import Path
from typing import Optional, List, Dict, Any

from ..core.constants import (
    GITHUB_LANGUAGES_URL, GITHUB_IMAGE_URL, REQUEST_TIMEOUT_S,
    DOWNLOAD_CHUNK_SIZE, TEMP_IMAGE_PREFIX,
)
from ..core.errors import DownloadError, MetadataError
from ..utils.files import atomic_write_chunks

DEFAULT_USER_AGENT = "ProjectCatalogSync/1.0"

def _headers(user_agent: str, accept: Optional[str] = None) -> Dict[str, str]:
    h = {"User-Agent": user_agent or DEFAULT_USER_AGENT}
    if accept:
        h["Accept"] = accept
    return h

def fetch_languages(
    owner: str,
    repo: str,
    timeout: float = REQUEST_TIMEOUT_S,
    user_agent: str = DEFAULT_USER_AGENT,
) -> List[str]:
    """
    Return the language names GitHub reports for owner/repo (sorted).
    Raises MetadataError naming the cause (network error, status, bad body);
    the caller decides what to keep.
    """
    url = GITHUB_LANGUAGES_URL.format(owner=owner, repo=repo)
    try:
        r = requests.get(url, headers=_headers(user_agent, "application/vnd.github+json"), timeout=timeout)
    except requests.RequestException as e:
        raise MetadataError(f"request failed: {e!r}") from e

    with r:
        if r.status_code != 200:
            raise MetadataError(f"languages request failed, status={r.status_code}", status_code=r.status_code)
        try:
            data: Any = r.json()
        except ValueError as e:
            raise MetadataError(f"bad json: {e!r}") from e

    if not isinstance(data, dict):
        raise MetadataError(f"body is {type(data).__name__}, expected object")

    # values are byte counts, only the names matter
    return sorted(str(k) for k in data)

def download_preview_image(
    owner: str,
    repo: str,
    dest: Path,
    timeout: float = REQUEST_TIMEOUT_S,
    user_agent: str = DEFAULT_USER_AGENT,
) -> int:
    """
    Fetch the Open Graph preview image for owner/repo and atomically replace `dest`.
    Returns the number of bytes stored; raises DownloadError on any failure,
    leaving `dest` untouched.
    """
    url = GITHUB_IMAGE_URL.format(owner=owner, repo=repo)
    try:
        r = requests.get(url, headers=_headers(user_agent), timeout=timeout, stream=True)
    except requests.RequestException as e:
        raise DownloadError(f"request failed: {e!r}") from e

    with r:
        if r.status_code != 200:
            raise DownloadError(f"failed to download image, status={r.status_code}", status_code=r.status_code)

        expected = None
        length = r.headers.get("Content-Length")
        # compressed bodies are decoded by iter_content, so the header is not comparable
        if length and length.isdigit() and not r.headers.get("Content-Encoding"):
            expected = int(length)

        try:
            return atomic_write_chunks(
                dest,
                r.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE),
                prefix=TEMP_IMAGE_PREFIX,
                expected_size=expected,
            )
        except requests.RequestException as e:
            raise DownloadError(f"transfer interrupted: {e!r}") from e
        except EOFError as e:
            raise DownloadError(f"truncated image: {e}") from e
        except OSError as e:
            raise DownloadError(f"error saving image {dest}: {e!r}") from e
