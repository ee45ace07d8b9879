"""Root test configuration: content directory fixtures and config isolation"""

from pathlib import Path

import pytest

from mdblog.config import Settings, ENV_PREFIX


POST_TEMPLATE = """\
---
title: {title}
date: {date}
{extra}---

{body}
"""


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Keep MDBLOG_* env vars from the outer shell out of every test."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path) -> Path:
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture(name="write_post")
def write_post_fixture(content_dir):
    """Factory writing a post with front matter into content_dir."""
    def _write(name: str, title: str = "A Post", date: str = "2020-08-24", body: str = "Body text.", **fields) -> Path:
        extra = "".join(f"{k}: {v}\n" for k, v in fields.items())
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(POST_TEMPLATE.format(title=title, date=date, extra=extra, body=body), encoding="utf-8")
        return path
    return _write
