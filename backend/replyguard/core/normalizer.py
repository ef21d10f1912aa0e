"""
ReplyGuard - Anatomy Normalizer
===============================
Rewrites colloquial anatomical terms in a drafted reply to the approved
clinical term.

Matching is case-insensitive substring matching with no word boundaries,
so a synonym embedded inside a longer word is rewritten as well. The
MRI template comparison downstream depends on this exact behaviour.
"""

import re

from .rules import RuleTables, DEFAULT_RULES


def normalize_anatomy(text: str, rules: RuleTables = DEFAULT_RULES) -> str:
    """Replace every synonym occurrence with the canonical anatomy term."""
    out = text
    for word in rules.anatomy_synonyms:
        out = re.sub(re.escape(word), rules.canonical_anatomy_term, out, flags=re.IGNORECASE)
    return out
