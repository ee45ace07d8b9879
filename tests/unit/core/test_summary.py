"""Unit tests for core/summary.py"""

from mdblog.core.summary import summarize, word_count


CODE_POST = """\
# Pure functions

A pure function has no side effects.

```python
def add(a, b):
    return a + b
```

- same input
- same output
"""


def test_word_count_skips_code_blocks():
    """Headings, paragraphs and list items count; fenced code does not."""
    assert word_count(CODE_POST) == 2 + 7 + 2 + 2


def test_word_count_empty_body():
    assert word_count("") == 0


def test_summarize_uses_paragraph_text():
    """Automatic summaries come from paragraphs only, markup removed."""
    assert summarize(CODE_POST) == "A pure function has no side effects."


def test_summarize_truncates_to_max_words():
    body = " ".join(f"w{i}" for i in range(100)) + "\n"
    assert summarize(body, max_words=5) == "w0 w1 w2 w3 w4 ..."


def test_summarize_more_divider():
    """Text before <!--more--> is the summary, untruncated."""
    body = "Intro with *emphasis* and `code`.\n\nSecond paragraph.\n\n<!--more-->\n\nThe rest.\n"
    assert summarize(body, max_words=2) == "Intro with emphasis and code. Second paragraph."


def test_summarize_more_divider_case_and_spacing():
    assert summarize("Lead.\n\n<!-- MORE -->\n\nTail.\n") == "Lead."


def test_summarize_ignores_divider_inside_code():
    """A <!--more--> inside a fenced block is code, not a divider."""
    body = "Intro para.\n\n```html\n<!--more-->\n```\n\nSecond para here.\n"
    assert summarize(body) == "Intro para. Second para here."


def test_summarize_ignores_divider_inside_blockquote():
    body = "Intro.\n\n> <!--more-->\n\nOutro.\n"
    assert summarize(body) == "Intro. Outro."
