"""Shared fixtures for core unit tests"""

from datetime import datetime, timezone

import pytest

from mdblog.core.models import Document


SAMPLE_POST = """\
---
title: Functors, Applicatives, And Monads
date: 2020-08-24T10:30:00+02:00
math: true
tags: [haskell, fp]
series:
  name: Category theory for programmers
  part: 2
---

A functor is a mapping between categories.

```haskell
fmap :: (a -> b) -> f a -> f b
```
"""


@pytest.fixture(name="sample_post")
def sample_post_fixture() -> str:
    return SAMPLE_POST


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for Documents without touching the filesystem."""
    def _make(path: str, day: int = 24, draft: bool = False, **kwargs) -> Document:
        return Document(
            path=path,
            title=kwargs.pop("title", path),
            date=kwargs.pop("date", datetime(2020, 8, day, tzinfo=timezone.utc)),
            draft=draft,
            slug=kwargs.pop("slug", path.rsplit(".", 1)[0]),
            **kwargs,
        )
    return _make
