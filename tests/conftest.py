"""
Shared fixtures: small corpora, CSV files and captured log output.
"""

import pytest
from loguru import logger


@pytest.fixture
def corpus(tmp_path):
    """Two-label corpus laid out as label-per-subfolder."""
    root = tmp_path / "labeled"
    (root / "sport").mkdir(parents=True)
    (root / "music").mkdir(parents=True)
    (root / "sport" / "a.txt").write_text("The team won the match.", encoding="utf-8")
    (root / "sport" / "b.txt").write_text("Goal! The striker scored twice.", encoding="utf-8")
    (root / "music" / "a.txt").write_text("The band played a new song.", encoding="utf-8")
    return root


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="rows.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def log_lines():
    """Collects every loguru message emitted during the test."""
    lines = []
    handler_id = logger.add(lambda message: lines.append(message.record["message"]), level="INFO")
    yield lines
    logger.remove(handler_id)
