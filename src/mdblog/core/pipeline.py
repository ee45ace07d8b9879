"""Pipeline step functions: parse one source, load a whole content directory"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from mdblog.core.collection import build_collection
from mdblog.core.frontmatter import parse_frontmatter, validate_metadata
from mdblog.core.load import MD_EXTENSIONS, SourceDir, SourceItem
from mdblog.core.models import CollectionConfig, Document, LoadResult, RawSource
from mdblog.core.summary import summarize, word_count
from mdblog.core.utils.text import sha256, slugify
from mdblog.errors import ContentError, DuplicatePathError


logger = logging.getLogger(__name__)


def parse_source(source: RawSource, summary_words: int = 70) -> Document:
    """Build a Document from raw text. Raises MalformedMetadataError."""
    raw, body = parse_frontmatter(source.text, source.path)
    meta = validate_metadata(raw, source.path)
    return Document(
        path=source.path,
        title=meta.title,
        date=meta.date,
        draft=meta.draft,
        math_enabled=meta.math,
        body=body,
        params=meta.params,
        slug=meta.slug or slugify(Path(source.path).stem),
        summary=summarize(body, summary_words),
        word_count=word_count(body),
        hash=sha256(source.text),
    )


def collect_documents(sources: Iterable[SourceItem], summary_words: int = 70) -> LoadResult:
    """Parse loader items in order. Read errors, malformed metadata and repeated
    paths are recorded in result.errors; the first source for a path wins.
    """
    result = LoadResult()
    seen: set[str] = set()
    for item in sources:
        if isinstance(item, ContentError):
            result.errors.append(item)
            continue
        if item.path in seen:
            result.errors.append(DuplicatePathError("duplicate document path", item.path))
            logger.warning("Skipping %s: duplicate path", item.path)
            continue
        seen.add(item.path)
        try:
            doc = parse_source(item, summary_words)
        except ContentError as e:
            logger.warning("Skipping %s", e)
            result.errors.append(e)
            continue
        logger.debug("Parsed %s (%s)", doc.path, doc.title)
        result.documents.append(doc)
    return result


def load_documents(
    root: Union[str, Path],
    extensions: Iterable[str] = MD_EXTENSIONS,
    summary_words: int = 70,
    ) -> LoadResult:
    """Parse every source under root. Per-document failures land in result.errors.

    Raises OSError only when root itself is missing or unreadable.
    """
    return collect_documents(SourceDir(root, extensions), summary_words)


def load_collection(
    root: Union[str, Path],
    config: Optional[CollectionConfig] = None,
    extensions: Iterable[str] = MD_EXTENSIONS,
    summary_words: int = 70,
    ) -> LoadResult:
    """Load root and return a fresh, filtered, ordered collection plus errors."""
    result = load_documents(root, extensions, summary_words)
    result.documents = build_collection(result.documents, config)
    return result
