"""Export helpers: rebuild markdown sources and a JSON-ready manifest"""

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from mdblog.core.frontmatter import dump_frontmatter
from mdblog.core.models import Document


def build_markdown(doc: Document) -> str:
    """Return the document's front matter block followed by its untouched body."""
    return dump_frontmatter(doc.metadata()) + doc.body


def _jsonable(value: Any) -> Any:
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_jsonable(v) for v in value]
    return value


def build_manifest(docs: Iterable[Document]) -> list[dict]:
    """Build manifest entries in collection order; bodies are left out."""
    return [
        {
            "path": doc.path,
            "slug": doc.slug,
            "title": doc.title,
            "date": doc.date.isoformat(),
            "draft": doc.draft,
            "math": doc.math_enabled,
            "summary": doc.summary,
            "word_count": doc.word_count,
            "hash": doc.hash,
            "params": _jsonable(doc.params),
        }
        for doc in docs
    ]


def write_manifest(docs: Iterable[Document], out: Path) -> Path:
    """Write the manifest as indented JSON to out, creating parent directories."""
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(build_manifest(docs), indent=2, ensure_ascii=False), encoding='utf-8')
    return out
