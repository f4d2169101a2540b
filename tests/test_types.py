from __future__ import annotations

from pathlib import Path

import pytest

from pyfilereader import Document, LocatedMatch, MatchCollection, MatchGroup, Searcher


def _group(index: int, text: str | None, name: str | None = None) -> MatchGroup:
    return MatchGroup(index, text, 0, 0, 0, len(text or ""), name=name)


class TestMatchCollection:
    def test_discovery_order_and_counts(self, fox_document: Document) -> None:
        result = Searcher().find_all(fox_document, r"(brown) (fox)", multiline=True)
        assert result.match_count == 3
        assert result.match_group_count == 3
        assert result.total_group_count == 9
        assert [m.start_line for m in result] == [0, 1, 5]

    def test_match_group_count_empty(self) -> None:
        assert MatchCollection().match_group_count == 0

    def test_get_match_out_of_range(self) -> None:
        result = MatchCollection(items=(LocatedMatch((_group(0, "a"),)),))
        assert result.get_match(0) is result[0]
        assert result.get_match(1) is None
        assert result.get_match(-1) is None

    def test_get_match_group(self) -> None:
        m = LocatedMatch((_group(0, "ab"), _group(1, "a", "first"), _group(2, None)))
        result = MatchCollection(items=(m,))
        assert result.get_match_group(0, 1) == "a"
        assert result.get_match_group(0, "first") == "a"
        assert result.get_match_group(0, 2) is None
        assert result.get_match_group(0, 5) is None
        assert result.get_match_group(3, 0) is None

    def test_immutable(self) -> None:
        result = MatchCollection()
        with pytest.raises(AttributeError):
            result.items = ()  # type: ignore[misc]


class TestDocument:
    def test_properties(self) -> None:
        doc = Document(lines=("ab", "c"), path=Path("/tmp/x/data.txt"))
        assert doc.line_count == 2
        assert len(doc) == 2
        assert list(doc) == ["ab", "c"]
        assert doc.file_name == "data.txt"
        assert doc.text == "abc"
        assert doc.offset_table.cumulative == (2, 3)

    def test_equal_documents(self) -> None:
        assert Document(lines=("a",)) == Document.from_text("a")
