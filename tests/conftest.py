"""Common test fixtures for declaration generation tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_source(tmp_path):
    """Write a wrapper source under tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
