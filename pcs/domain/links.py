from typing import Optional, Tuple

from ..core.constants import RE_GITHUB_LINK

def match_repo_link(link: object) -> Optional[Tuple[str, str]]:
    """
    Extract (owner, repo) from a GitHub repository URL.

    Returns None for anything that is not https://github.com/<owner>/<repo>,
    including empty or malformed strings. Never raises.

    Examples:
        >>> match_repo_link("https://github.com/foo/bar")
        ('foo', 'bar')
        >>> match_repo_link("https://github.com/foo/bar.git")
        ('foo', 'bar')
        >>> match_repo_link("not a url") is None
        True
    """
    if not isinstance(link, str) or not link:
        return None
    m = RE_GITHUB_LINK.match(link.strip())
    if not m:
        return None
    owner, repo = m.group("owner"), m.group("repo")
    if repo in (".", ".."):
        return None
    return owner, repo
