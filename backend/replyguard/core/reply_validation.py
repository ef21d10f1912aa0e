"""
ReplyGuard - Reply Validation Pipeline
======================================
Single entry point that normalizes a drafted reply and decides whether it
can be released or must go to manual review.

Order of operations (first failure wins):
1. Rewrite colloquial anatomy terms
2. Reflow to one sentence per line
3. Approved opening
4. 3-4 non-empty lines
5. No forbidden closing / reassurance phrases
6. Scenario-specific rules

Normalization always runs, so a failed result still carries the
best-effort text for the human reviewer. A failed check is a normal
result, never an exception.
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum

from .rules import RuleTables, DEFAULT_RULES
from .normalizer import normalize_anatomy
from .segmentation import split_sentences_into_lines, count_lines
from .phrase_checks import has_allowed_opening, contains_forbidden_phrases
from .scenarios import Scenario, classify_scenario, validate_scenario


class ReplyCheck(Enum):
    """Checks that can reject a reply."""
    OPENING = "opening"
    LINE_COUNT = "line_count"
    FORBIDDEN_PHRASE = "forbidden_phrase"
    SCENARIO = "scenario"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation pass."""
    passed: bool
    normalized_text: str
    scenario: Scenario
    failed_check: Optional[ReplyCheck] = None   # None when passed

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "normalized_text": self.normalized_text,
            "scenario": self.scenario.value,
            "failed_check": self.failed_check.value if self.failed_check else None,
        }


def validate_reply(
    raw_text: str,
    classification: str,
    rules: RuleTables = DEFAULT_RULES
) -> ValidationResult:
    """
    Normalize a raw model reply and run every release check on it.

    Args:
        raw_text: Reply exactly as returned by the generator (may be empty)
        classification: Caller's classification label; unknown labels use
            the DEFAULT scenario

    Returns:
        ValidationResult with the normalized text in every case
    """
    text = normalize_anatomy(raw_text, rules)
    text = split_sentences_into_lines(text)
    scenario = classify_scenario(classification, rules)

    def reject(check: ReplyCheck) -> ValidationResult:
        return ValidationResult(
            passed=False, normalized_text=text, scenario=scenario, failed_check=check
        )

    if not has_allowed_opening(text, rules):
        return reject(ReplyCheck.OPENING)

    lines = count_lines(text)
    if lines < rules.min_lines or lines > rules.max_lines:
        return reject(ReplyCheck.LINE_COUNT)

    if contains_forbidden_phrases(text, rules):
        return reject(ReplyCheck.FORBIDDEN_PHRASE)

    if not validate_scenario(text, scenario, rules):
        return reject(ReplyCheck.SCENARIO)

    return ValidationResult(passed=True, normalized_text=text, scenario=scenario)
