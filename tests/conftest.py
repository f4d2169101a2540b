"""
Shared test fixtures for pyfilereader tests.
"""

from pathlib import Path

import pytest

from pyfilereader import Document, FileReader, ReaderConfig
from pyfilereader.logging_config import disable_logging

# Lines where "brown fox" appears whole, split over two lines and over four.
FOX_LINES = [
    "the quick brown fox",
    "the quick brown",
    " fox",
    "the quick brown",
    "fox",
    "the quick bro",
    "wn",
    " f",
    "ox",
]

NUMERIC_LINES = ["1", "2.5", "-3e2", " 4 "]


@pytest.fixture(autouse=True)
def _quiet_logging():
    disable_logging()
    yield


@pytest.fixture
def fox_document() -> Document:
    return Document(lines=tuple(FOX_LINES))


@pytest.fixture
def fox_file(tmp_path: Path) -> Path:
    path = tmp_path / "fox.txt"
    path.write_text("\n".join(FOX_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def numeric_file(tmp_path: Path) -> Path:
    path = tmp_path / "numbers.txt"
    path.write_text("\n".join(NUMERIC_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def reader() -> FileReader:
    return FileReader(ReaderConfig())


class TestDataHelper:
    """Helper class for creating test data and assertions."""

    @staticmethod
    def create_file_with_content(path: Path, content: str, encoding: str = "utf-8") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode(encoding))
        return path

    @staticmethod
    def coords(collection) -> list[tuple[int, int, int, int]]:
        return [(m.start_line, m.end_line, m.start_index, m.end_index) for m in collection]


@pytest.fixture
def test_helper():
    """Provide the TestDataHelper for tests."""
    return TestDataHelper()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "api: API-related tests")
    config.addinivalue_line("markers", "matcher: Matcher-related tests")
