from pathlib import Path, PurePosixPath
from typing import Callable, Optional, List

from ..adapters.github_api import fetch_languages, download_preview_image
from ..core.constants import IMAGES_DIR, IMAGE_EXT
from ..core.errors import DownloadError, MetadataError
from ..core.models import SyncResult
from ..utils.log import log_line
from .catalog import Catalog
from .links import match_repo_link

LogFn = Callable[..., None]
FetchLanguagesFn = Callable[..., List[str]]
DownloadFn = Callable[..., int]

def image_relpath(repo: str, images_dir: str = IMAGES_DIR) -> str:
    """Catalog-relative path of a repository's preview image, e.g. images/bar.png."""
    return str(PurePosixPath(images_dir) / f"{repo}{IMAGE_EXT}")

def enrich_catalog(
    catalog: Catalog,
    root: Path,
    images_dir: str = IMAGES_DIR,
    timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
    log: LogFn = log_line,
    fetch: FetchLanguagesFn = fetch_languages,
    download: DownloadFn = download_preview_image,
) -> SyncResult:
    """
    Enrich every entry that links to a GitHub repository, one at a time.

    For a matching entry the preview image is downloaded first; if that fails
    the entry is left as it was. Otherwise `image` is pointed at the downloaded
    file and `languages` is replaced by what the API reports (kept as-is when
    the languages call fails; the cause is logged with the entry key).
    Entries without a GitHub link are not touched.
    Failures never stop the loop; they end up in SyncResult.errors.
    """
    result = SyncResult(total=len(catalog))
    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout
    if user_agent:
        kwargs["user_agent"] = user_agent

    # snapshot of keys: values are replaced below, keys never change
    for key in list(catalog):
        entry = catalog[key]
        parsed = match_repo_link(entry.link)
        if not parsed:
            result.skipped += 1
            continue

        result.matched += 1
        owner, repo = parsed
        rel = image_relpath(repo, images_dir)

        try:
            download(owner, repo, Path(root) / rel, **kwargs)
        except DownloadError as e:
            log(f"IMAGE FAIL | key={key} name={entry.name!r} repo={owner}/{repo} | {e}", "ERROR")
            result.errors.append(f"{key}: {e}")
            continue

        updates = {"image": rel}
        try:
            updates["languages"] = fetch(owner, repo, **kwargs)
        except MetadataError as e:
            log(f"LANGUAGES FAIL | key={key} repo={owner}/{repo} | {e} | keeping previous value", "WARN")
            result.errors.append(f"{key}: {e}")

        catalog[key] = entry.with_updates(**updates)
        result.enriched += 1
        log(f"ENRICH OK | key={key} repo={owner}/{repo} languages={len(catalog[key].languages)}")

    return result
