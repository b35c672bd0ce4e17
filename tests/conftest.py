import json
from unittest.mock import MagicMock

import pytest
import requests


def make_response(status_code=200, json_data=None, body=b"", chunks=None, headers=None, json_error=None):
    """Fake requests.Response usable as a context manager."""
    r = MagicMock()
    r.status_code = status_code
    r.headers = dict(headers or {})
    if json_error is not None:
        r.json.side_effect = json_error
    else:
        r.json.return_value = json_data
    if chunks is None:
        chunks = [body] if body else []
    r.iter_content.side_effect = lambda chunk_size=1: iter(chunks)
    return r


def truncated_chunks(*parts):
    """Yield the given parts, then fail like a dropped connection."""
    for p in parts:
        yield p
    raise requests.exceptions.ChunkedEncodingError("Connection broken: IncompleteRead")


@pytest.fixture
def workspace(tmp_path):
    """A catalog root with data.json + README.md; returns a writer helper."""
    def write(data, readme="# Projects\n\nLast Updated: never\n"):
        (tmp_path / "data.json").write_text(json.dumps(data, indent=2), encoding="utf-8")
        (tmp_path / "README.md").write_text(readme, encoding="utf-8")
        return tmp_path
    return write


@pytest.fixture
def captured_log():
    lines = []

    def log(msg, level="INFO"):
        lines.append((level, str(msg)))

    log.lines = lines
    return log
