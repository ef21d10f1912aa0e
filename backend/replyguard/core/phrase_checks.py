"""
ReplyGuard - Opening and Phrase Checks
======================================
Literal checks on a reply's greeting and on banned closing/reassurance
phrases. Both are plain substring tests: case-sensitive, no fuzzy
matching and no word boundaries.
"""

from typing import List

from .rules import RuleTables, DEFAULT_RULES


def has_allowed_opening(text: str, rules: RuleTables = DEFAULT_RULES) -> bool:
    """True if the trimmed reply starts with an approved greeting."""
    stripped = text.strip()
    return any(stripped.startswith(opening) for opening in rules.allowed_openings)


def find_forbidden_phrases(text: str, rules: RuleTables = DEFAULT_RULES) -> List[str]:
    """Every forbidden closing or reassurance phrase present in the reply."""
    return [phrase for phrase in rules.forbidden_phrases if phrase in text]


def contains_forbidden_phrases(text: str, rules: RuleTables = DEFAULT_RULES) -> bool:
    return bool(find_forbidden_phrases(text, rules))
