"""
Tests for links.py - GitHub repository link matching.
"""

import pytest
from pcs.domain.links import match_repo_link


class TestMatchRepoLink:
    """Tests for owner/repo extraction."""

    def test_plain_repo_url(self):
        assert match_repo_link("https://github.com/foo/bar") == ("foo", "bar")

    def test_hyphenated_names(self):
        assert match_repo_link("https://github.com/my-org/my-repo-2") == ("my-org", "my-repo-2")

    def test_trailing_slash(self):
        assert match_repo_link("https://github.com/foo/bar/") == ("foo", "bar")

    def test_extra_path_is_ignored(self):
        assert match_repo_link("https://github.com/foo/bar/tree/main/src") == ("foo", "bar")

    def test_query_and_fragment(self):
        assert match_repo_link("https://github.com/foo/bar?tab=readme") == ("foo", "bar")
        assert match_repo_link("https://github.com/foo/bar#install") == ("foo", "bar")

    def test_dots_and_underscores_in_repo(self):
        """Repo names may contain dots and underscores."""
        assert match_repo_link("https://github.com/foo/dot.files") == ("foo", "dot.files")
        assert match_repo_link("https://github.com/foo/my_repo") == ("foo", "my_repo")

    def test_git_suffix_is_stripped(self):
        assert match_repo_link("https://github.com/foo/bar.git") == ("foo", "bar")

    def test_www_host(self):
        assert match_repo_link("https://www.github.com/foo/bar") == ("foo", "bar")

    @pytest.mark.parametrize("link", [
        "",
        "not a url",
        "https://github.com/",
        "https://github.com/foo",
        "https://github.com/foo/",
        "http://github.com/foo/bar",
        "https://gitlab.com/foo/bar",
        "https://example.com/foo/bar",
        "https://github.com.evil.io/foo/bar",
        "https://github.com/fo_o/bar",
        "https://github.com/foo/..",
        "prefix https://github.com/foo/bar",
    ])
    def test_no_match(self, link):
        assert match_repo_link(link) is None

    def test_non_string_input(self):
        assert match_repo_link(None) is None
        assert match_repo_link(42) is None
