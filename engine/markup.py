"""
Narrative markup
----------------
The game master emphasises words with paired ``**`` delimiters.
An unmatched trailing delimiter is kept as literal text.
"""

from __future__ import annotations

import html
from typing import Iterator, NamedTuple

DELIMITER = "**"

ANSI_STRONG = "\033[1;33m"
ANSI_RESET = "\033[0m"


class Span(NamedTuple):
    text: str
    emphasized: bool = False


def iter_spans(text: str) -> Iterator[Span]:
    """
    Yield plain and emphasized spans lazily, left to right.
    Empty spans are skipped.
    """
    pos = 0
    while True:
        start = text.find(DELIMITER, pos)
        if start < 0:
            break
        end = text.find(DELIMITER, start + len(DELIMITER))
        if end < 0:
            break
        if start > pos:
            yield Span(text[pos:start])
        inner = text[start + len(DELIMITER):end]
        if inner:
            yield Span(inner, True)
        pos = end + len(DELIMITER)
    if pos < len(text):
        yield Span(text[pos:])


def render_ansi(text: str) -> str:
    return "".join(
        f"{ANSI_STRONG}{span.text}{ANSI_RESET}" if span.emphasized else span.text
        for span in iter_spans(text)
    )


def render_html(text: str, css_class: str = "highlight") -> str:
    parts = []
    for span in iter_spans(text):
        escaped = html.escape(span.text)
        if span.emphasized:
            parts.append(f'<strong class="{css_class}">{escaped}</strong>')
        else:
            parts.append(escaped)
    return "".join(parts)


def strip_markup(text: str) -> str:
    return "".join(span.text for span in iter_spans(text))
