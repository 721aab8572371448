from __future__ import annotations

import pytest

from datafile.document import DataDocument
from datafile.errors import MalformedRecordError


def test_document_from_text_and_back():
    doc = DataDocument.from_text("¡title:\n^Hello World~\n\n¡body:\n^Line one~")

    assert len(doc) == 2
    assert "title" in doc
    assert "missing" not in doc
    assert doc.get("body") == "Line one"
    assert doc.get("missing") is None
    assert doc.get("missing", "fallback") == "fallback"
    assert doc.keys() == ["body", "title"]
    assert doc.to_text() == "¡body:\n^Line one~\n\n¡title:\n^Hello World~"


def test_document_strict_policy():
    assert DataDocument.from_text("¡k:^v").entries == {}
    with pytest.raises(MalformedRecordError):
        DataDocument.from_text("¡k:^v", strict=True)


def test_document_as_dict_is_a_copy():
    doc = DataDocument(entries={"k": "v"})
    d = doc.as_dict()
    d["k"] = "changed"
    assert doc.get("k") == "v"


def test_document_dump():
    doc = DataDocument(entries={"k": "v"})
    assert doc.model_dump() == {"entries": {"k": "v"}}
    assert DataDocument.model_validate({"entries": {"k": "v"}}) == doc
