"""
ReplyGuard - Line Segmentation
==============================
Reflows a drafted reply into one sentence per line and counts the
resulting lines for the structural gate.
"""

import re
from typing import List

from .rules import TERMINAL_PUNCTUATION

_LINE_BREAK = re.compile(r'\r?\n')

_TERMINALS = re.escape(TERMINAL_PUNCTUATION)

# A run of text plus any trailing terminal marks, or a bare run of marks
# (e.g. a line opening with "...") so no character is ever dropped
_SENTENCE = re.compile(rf'[^{_TERMINALS}]+[{_TERMINALS}]*|[{_TERMINALS}]+')


def split_into_sentences(line: str) -> List[str]:
    """Split a single line into trimmed, non-empty sentence fragments."""
    parts = [p.strip() for p in _SENTENCE.findall(line)]
    return [p for p in parts if p]


def split_sentences_into_lines(text: str) -> str:
    """
    Put each sentence-like fragment of the text on its own line.

    Blank lines are dropped. A line with no terminal punctuation is kept
    whole. Order is preserved across and within lines.
    """
    result: List[str] = []
    for line in _LINE_BREAK.split(text):
        trimmed = line.strip()
        if not trimmed:
            continue
        fragments = split_into_sentences(trimmed)
        if fragments:
            result.extend(fragments)
        else:
            result.append(trimmed)
    return "\n".join(result)


def count_lines(text: str) -> int:
    """Number of non-empty lines in the trimmed text."""
    return len([line for line in _LINE_BREAK.split(text.strip()) if line.strip()])
