"""Body summaries and word counts from markdown-it inline tokens"""

import re

from markdown_it import MarkdownIt


MORE_RE = re.compile(r'<!--\s*more\s*-->', re.IGNORECASE)


def _make_parser() -> MarkdownIt:
    return MarkdownIt('commonmark')


def _inline_text(token) -> str:
    """Flatten an inline token to plain text; code spans keep their content."""
    parts = []
    for child in token.children or []:
        if child.type in ('text', 'code_inline'):
            parts.append(child.content)
        elif child.type in ('softbreak', 'hardbreak'):
            parts.append(' ')
    return ''.join(parts)


def _paragraph_text(tokens: list) -> list[str]:
    """Text of top-level paragraphs; list items and blockquotes are skipped."""
    return [
        _inline_text(tok) for i, tok in enumerate(tokens)
        if tok.type == 'inline' and tok.level == 1 and tokens[i - 1].type == 'paragraph_open'
    ]


def word_count(body: str) -> int:
    """Count words in prose (paragraphs, headings, list items); code blocks are excluded."""
    tokens = _make_parser().parse(body)
    return sum(len(_inline_text(tok).split()) for tok in tokens if tok.type == 'inline')


def _more_index(tokens: list) -> int | None:
    """Position of a top-level <!--more--> html block; dividers inside code are ignored."""
    for i, tok in enumerate(tokens):
        if tok.type == 'html_block' and tok.level == 0 and MORE_RE.fullmatch(tok.content.strip()):
            return i
    return None


def summarize(body: str, max_words: int = 70) -> str:
    """Return the text before a <!--more--> divider, else the leading max_words words."""
    tokens = _make_parser().parse(body)
    cut = _more_index(tokens)
    if cut is not None:
        return ' '.join(' '.join(_paragraph_text(tokens[:cut])).split())
    words = ' '.join(_paragraph_text(tokens)).split()
    if len(words) <= max_words:
        return ' '.join(words)
    return ' '.join(words[:max_words]) + ' ...'
