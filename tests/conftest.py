"""Pytest configuration for the modelwarp test suite."""

import pytest


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path as a string."""
    def _write(text: str, name: str = "data.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
