"""Unit tests for core/models.py"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mdblog.core.models import Document, RawSource
from mdblog.core.pipeline import parse_source


def test_document_params_read_only(sample_post):
    """params cannot be mutated after construction."""
    doc = parse_source(RawSource("functors.md", sample_post))
    with pytest.raises(TypeError):
        doc.params["added"] = 1
    assert "added" not in doc.params


def test_document_params_default_read_only(make_doc):
    doc = make_doc("a.md")
    with pytest.raises(TypeError):
        doc.params["x"] = 1


def test_document_fields_frozen(make_doc):
    doc = make_doc("a.md")
    with pytest.raises(ValidationError):
        doc.title = "changed"


def test_document_hashable(make_doc):
    a, b = make_doc("a.md"), make_doc("a.md")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, make_doc("b.md")}) == 2


def test_document_params_equality_and_dump():
    doc = Document(
        path="p.md", title="T", slug="p",
        date=datetime(2020, 8, 24, tzinfo=timezone.utc),
        params={"tags": ["fp"]},
    )
    assert doc.params == {"tags": ["fp"]}
    assert doc.model_dump()["params"] == {"tags": ["fp"]}
    assert isinstance(doc.model_dump()["params"], dict)
