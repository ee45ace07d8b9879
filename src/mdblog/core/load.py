"""Content discovery and lazy, restartable source reading"""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Union

from mdblog.core.models import RawSource
from mdblog.errors import SourceReadError


logger = logging.getLogger(__name__)

MD_EXTENSIONS = ('.md', '.markdown', '.mdx')
BOM = '\ufeff'

SourceItem = Union[RawSource, SourceReadError]


def _check_root(root: Path) -> None:
    """Raise OSError unless root is a listable directory."""
    if not root.exists():
        raise FileNotFoundError(f"Content directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Content path is not a directory: {root}")
    with os.scandir(root):
        pass


def _read_error(message: str, rel: str, cause: Exception) -> SourceReadError:
    err = SourceReadError(f"{message}: {cause}", rel)
    err.__cause__ = cause
    logger.warning("Skipping %s: %s", rel, cause)
    return err


def scan_tree(root: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> tuple[list[Path], list[SourceReadError]]:
    """Walk root for content files; each unlistable subdirectory becomes a SourceReadError.

    Dot-prefixed files and directories are skipped. Files come back sorted by
    relative path.
    """
    root = Path(root)
    _check_root(root)
    suffixes = {e.lower() for e in extensions}
    files: list[Path] = []
    errors: list[SourceReadError] = []

    def _on_error(e: OSError) -> None:
        rel = Path(e.filename).relative_to(root).as_posix() if e.filename else '.'
        errors.append(_read_error("cannot list directory", rel, e))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith('.'))
        for name in filenames:
            p = Path(dirpath) / name
            if not name.startswith('.') and p.suffix.lower() in suffixes and p.is_file():
                files.append(p)

    files.sort(key=lambda p: p.relative_to(root).as_posix())
    errors.sort(key=lambda e: e.path)
    return files, errors


def discover_files(root: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[Path]:
    """Return content files under root sorted by relative path."""
    return scan_tree(root, extensions)[0]


def read_source(path: Path, root: Path) -> SourceItem:
    """Read one file; failures come back as a SourceReadError instead of raising."""
    rel = path.relative_to(root).as_posix()
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        return _read_error("cannot read source", rel, e)
    logger.debug("Read %s (%d chars)", rel, len(text))
    return RawSource(path=rel, text=text.removeprefix(BOM))


def _read_all(files: list[Path], errors: list[SourceReadError], root: Path) -> Iterator[SourceItem]:
    yield from errors
    for p in files:
        yield read_source(p, root)


class SourceDir:
    """A content directory. Every iteration re-scans and re-reads from disk.

    Iterating raises OSError up front when the root itself is missing or
    unreadable; unreadable subdirectories and files are yielded as
    SourceReadError items.
    """

    def __init__(self, root: Union[str, Path], extensions: Iterable[str] = MD_EXTENSIONS):
        self.root = Path(root)
        self.extensions = tuple(extensions)

    def __iter__(self) -> Iterator[SourceItem]:
        files, errors = scan_tree(self.root, self.extensions)
        logger.debug("Found %d content file(s) under %s", len(files), self.root)
        return _read_all(files, errors, self.root)

    def __repr__(self) -> str:
        return f"SourceDir({str(self.root)!r})"
