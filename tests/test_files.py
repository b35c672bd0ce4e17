"""
Tests for files.py - JSON helpers and atomic writes.
"""

import json
import pytest
from pathlib import Path

import pcs.utils.files as files_module
from pcs.utils.files import load_json, save_json, atomic_write_chunks


def _boom(*parts):
    for p in parts:
        yield p
    raise IOError("disk went away")


class TestLoadJson:

    def test_missing_returns_default(self, tmp_path):
        assert load_json(tmp_path / "x.json", {"d": 1}) == {"d": 1}

    def test_invalid_returns_default(self, tmp_path):
        p = tmp_path / "x.json"
        p.write_text("{", encoding="utf-8")
        assert load_json(p, []) == []

    def test_valid(self, tmp_path):
        p = tmp_path / "x.json"
        p.write_text('{"a": 1}', encoding="utf-8")
        assert load_json(p, None) == {"a": 1}


class TestSaveJson:

    def test_creates_parents_and_trailing_newline(self, tmp_path):
        p = tmp_path / "nested" / "x.json"
        save_json(p, {"a": "ü"})
        assert p.read_text(encoding="utf-8") == '{\n  "a": "ü"\n}\n'

    def test_no_temp_files_left(self, tmp_path):
        p = tmp_path / "x.json"
        save_json(p, {"a": 1})
        save_json(p, {"a": 2})
        assert [q.name for q in tmp_path.iterdir()] == ["x.json"]
        assert json.loads(p.read_text(encoding="utf-8")) == {"a": 2}


class TestAtomicWriteChunks:

    def test_writes_all_chunks(self, tmp_path):
        p = tmp_path / "img" / "a.png"
        n = atomic_write_chunks(p, [b"ab", b"", b"cd"])
        assert n == 4
        assert p.read_bytes() == b"abcd"

    def test_failure_mid_stream_leaves_destination(self, tmp_path):
        p = tmp_path / "a.png"
        p.write_bytes(b"old")

        with pytest.raises(IOError):
            atomic_write_chunks(p, _boom(b"new-but-partial"), prefix="temp-image-")

        assert p.read_bytes() == b"old"
        assert [q.name for q in tmp_path.iterdir()] == ["a.png"]

    def test_failure_without_previous_file(self, tmp_path):
        p = tmp_path / "a.png"

        with pytest.raises(IOError):
            atomic_write_chunks(p, _boom(b"x"))

        assert list(tmp_path.iterdir()) == []

    def test_expected_size_mismatch(self, tmp_path):
        p = tmp_path / "a.png"
        with pytest.raises(EOFError):
            atomic_write_chunks(p, [b"abc"], expected_size=10)
        assert not p.exists()

    def test_expected_size_match(self, tmp_path):
        p = tmp_path / "a.png"
        assert atomic_write_chunks(p, [b"abc"], expected_size=3) == 3

    def test_cleanup_failure_is_logged_and_original_error_kept(self, tmp_path, monkeypatch):
        """A temp file that can't be removed is reported, the write error still propagates."""
        p = tmp_path / "a.png"
        p.write_bytes(b"old")
        logged = []
        monkeypatch.setattr(files_module, "log_line", lambda msg, level="INFO": logged.append((level, msg)))

        def deny_unlink(self, missing_ok=False):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "unlink", deny_unlink)

        with pytest.raises(IOError, match="disk went away"):
            atomic_write_chunks(p, _boom(b"partial"), prefix="temp-image-")

        assert p.read_bytes() == b"old"
        warns = [msg for level, msg in logged if level == "WARN"]
        assert len(warns) == 1
        assert warns[0].startswith("TEMP CLEANUP WARN | unlink ")
        assert "temp-image-" in warns[0]
