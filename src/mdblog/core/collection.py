"""Collection ordering and draft/future filtering"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from mdblog.core.models import CollectionConfig, Document
from mdblog.errors import DuplicatePathError


logger = logging.getLogger(__name__)


def sort_documents(docs: Iterable[Document]) -> list[Document]:
    """Order by date descending, ties by path ascending. Idempotent."""
    return sorted(docs, key=Document.sort_key)


def _reference_time(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return now if now.utcoffset() is not None else now.replace(tzinfo=timezone.utc)


def filter_documents(docs: Iterable[Document], config: Optional[CollectionConfig] = None) -> list[Document]:
    """Drop drafts (and future-dated posts when configured), preserving input order."""
    config = config or CollectionConfig()
    out = [d for d in docs if config.include_drafts or not d.draft]
    if not config.include_future:
        now = _reference_time(config.now)
        out = [d for d in out if d.date <= now]
    return out


def check_unique_paths(docs: Iterable[Document]) -> None:
    """Raise DuplicatePathError on the first path seen twice."""
    seen: set[str] = set()
    for d in docs:
        if d.path in seen:
            raise DuplicatePathError("duplicate document path", d.path)
        seen.add(d.path)


def build_collection(docs: Iterable[Document], config: Optional[CollectionConfig] = None) -> list[Document]:
    """Validate path uniqueness, then filter and sort into publishing order."""
    docs = list(docs)
    check_unique_paths(docs)
    published = sort_documents(filter_documents(docs, config))
    logger.debug("Collection built: %d of %d document(s)", len(published), len(docs))
    return published
