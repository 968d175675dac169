"""
Unit tests for loading exported entries.
"""

import json
from pathlib import Path

import pytest

from note_search.exceptions import DocumentStoreError, FileHandlerError
from note_search.utils.file_handler import load_documents, read_json


class TestReadJson:
    """Tests for read_json."""

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileHandlerError, match="not found"):
            read_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(FileHandlerError, match="Invalid JSON"):
            read_json(path)


class TestLoadDocuments:
    """Tests for load_documents."""

    def test_list_of_entries(self, tmp_path: Path):
        path = tmp_path / "entries.json"
        path.write_text(json.dumps([
            {"id": "1", "title": "Java Programming", "tags": ["programming"],
             "created_at": "2024-05-01T09:30:00"},
            {"id": "2", "title": "Personal Thoughts", "favorite": True},
        ]))

        documents = load_documents(path)

        assert [d.id for d in documents] == ["1", "2"]
        assert documents[0].tags == ("programming",)
        assert documents[0].created_at.year == 2024
        assert documents[1].favorite is True

    def test_wrapped_entries(self, tmp_path: Path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"entries": [{"id": "a", "title": "One"}]}))

        assert [d.id for d in load_documents(path)] == ["a"]

    def test_invalid_entry(self, tmp_path: Path):
        path = tmp_path / "entries.json"
        path.write_text(json.dumps([{"id": "1", "created_at": "not a date"}]))

        with pytest.raises(DocumentStoreError):
            load_documents(path)
