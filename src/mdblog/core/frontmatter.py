"""Front matter extraction, validation, and serialization

A metadata block opens with a first line of ``---`` and closes at the next
``---`` (or YAML's ``...``) line. Everything after the closing line is the
body, returned untouched.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from mdblog.core.models import Metadata
from mdblog.errors import MalformedMetadataError


OPEN_RE = re.compile(r'^---[ \t]*$')
CLOSE_RE = re.compile(r'^(?:---|\.\.\.)[ \t]*$')

REQUIRED_KEYS = ('title', 'date')
BOOLEAN_KEYS = ('draft', 'math')
RECOGNIZED_KEYS = frozenset(REQUIRED_KEYS + BOOLEAN_KEYS + ('slug',))


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that reads scalar mapping keys as strings.

    Under YAML 1.1 plain keys such as `on`, `no` or `2021` would otherwise
    load as bools and ints.
    """

    def flatten_mapping(self, node):
        super().flatten_mapping(node)
        for key_node, _ in node.value:
            if isinstance(key_node, yaml.ScalarNode):
                key_node.tag = 'tag:yaml.org,2002:str'


def split_frontmatter(text: str, path: Optional[str] = None) -> tuple[Optional[str], str]:
    """Return (raw_block, body); raw_block is None when the text has no front matter."""
    lines = text.splitlines(keepends=True)
    if not lines or not OPEN_RE.match(lines[0].rstrip('\r\n')):
        return None, text
    for i in range(1, len(lines)):
        if CLOSE_RE.match(lines[i].rstrip('\r\n')):
            return ''.join(lines[1:i]), ''.join(lines[i + 1:])
    raise MalformedMetadataError("front matter opened with '---' but never closed", path)


def parse_frontmatter(text: str, path: Optional[str] = None) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body). A missing block gives an empty dict."""
    block, body = split_frontmatter(text, path)
    if block is None:
        return {}, body
    try:
        data = yaml.load(block, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        raise MalformedMetadataError(f"invalid YAML front matter: {e}", path) from e
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise MalformedMetadataError(
            f"front matter must be a mapping, got {type(data).__name__}", path)
    bad = [k for k in data if not isinstance(k, str)]
    if bad:
        raise MalformedMetadataError(f"front matter keys must be strings, got {bad!r}", path)
    return data, body


def _coerce_date(value: Any, path: Optional[str]) -> datetime:
    """Accept YAML timestamps, bare dates and ISO-8601 strings; naive values are UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time(), tzinfo=timezone.utc)
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise MalformedMetadataError(f"'date' is not a valid timestamp: {value!r}", path) from e
    else:
        raise MalformedMetadataError(f"'date' is not a valid timestamp: {value!r}", path)
    if dt.utcoffset() is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _coerce_bool(raw: Mapping[str, Any], key: str, path: Optional[str]) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise MalformedMetadataError(f"'{key}' must be true or false, got {value!r}", path)
    return value


def validate_metadata(raw: Mapping[str, Any], path: Optional[str] = None) -> Metadata:
    """Check required and typed keys; unknown keys are kept in Metadata.params."""
    missing = [k for k in REQUIRED_KEYS if raw.get(k) is None]
    if missing:
        raise MalformedMetadataError(f"missing required field(s): {', '.join(missing)}", path)

    title = raw['title']
    if not isinstance(title, str) or not title.strip():
        raise MalformedMetadataError(f"'title' must be a non-empty string, got {title!r}", path)

    slug = raw.get('slug')
    if slug is not None and (not isinstance(slug, str) or not slug.strip()):
        raise MalformedMetadataError(f"'slug' must be a non-empty string, got {slug!r}", path)

    try:
        return Metadata(
            title=title.strip(),
            date=_coerce_date(raw['date'], path),
            draft=_coerce_bool(raw, 'draft', path),
            math=_coerce_bool(raw, 'math', path),
            slug=slug.strip() if slug is not None else None,
            params={k: v for k, v in raw.items() if k not in RECOGNIZED_KEYS},
        )
    except ValidationError as e:
        raise MalformedMetadataError(f"invalid front matter: {e}", path) from e


def dump_frontmatter(metadata: Union[Metadata, Mapping[str, Any]]) -> str:
    """Serialize metadata into a delimited YAML block, keys in insertion order."""
    if isinstance(metadata, Metadata):
        metadata = metadata.to_frontmatter()
    header = yaml.safe_dump(dict(metadata), default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n"
