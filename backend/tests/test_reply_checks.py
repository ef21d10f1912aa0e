"""
ReplyGuard - Individual Reply Check Tests
=========================================
Tests for the building blocks of the validation pipeline:
    normalizer.py, segmentation.py, phrase_checks.py, scenarios.py

Usage:
    pytest backend/tests/test_reply_checks.py -v
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from replyguard.core.normalizer import normalize_anatomy
from replyguard.core.segmentation import (
    split_into_sentences,
    split_sentences_into_lines,
    count_lines,
)
from replyguard.core.phrase_checks import (
    has_allowed_opening,
    find_forbidden_phrases,
    contains_forbidden_phrases,
)
from replyguard.core.scenarios import Scenario, classify_scenario, validate_scenario
from replyguard.core.rules import (
    RuleTables,
    CANONICAL_ANATOMY_TERM,
    MRI_PERIOD_TEMPLATE,
)


# =============================================================================
# Normalizer
# =============================================================================

class TestNormalizeAnatomy:

    @pytest.mark.parametrize("word", ["صرمي", "طيزي", "طيز", "مؤخرتي", "مؤخرة", "خلفيتي", "خلفية", "دبري"])
    def test_each_synonym_is_replaced(self, word):
        out = normalize_anatomy(f"عندي ألم في {word} من يومين")
        assert out == f"عندي ألم في {CANONICAL_ANATOMY_TERM} من يومين"

    def test_all_occurrences_replaced(self):
        out = normalize_anatomy("طيز و طيز")
        assert out == f"{CANONICAL_ANATOMY_TERM} و {CANONICAL_ANATOMY_TERM}"

    def test_embedded_synonym_is_replaced(self):
        # No word boundaries: the article prefix stays attached
        assert normalize_anatomy("بالمؤخرة") == f"بال{CANONICAL_ANATOMY_TERM}"

    def test_longer_synonym_wins_over_prefix(self):
        assert normalize_anatomy("مؤخرتي") == CANONICAL_ANATOMY_TERM

    def test_case_insensitive(self):
        rules = RuleTables(anatomy_synonyms=("butt",), canonical_anatomy_term="lower back")
        assert normalize_anatomy("My BUTT and Butt hurt", rules) == "My lower back and lower back hurt"

    def test_clean_text_unchanged(self):
        text = "سلامتك 🌸\nيُفضل مراجعة العيادة."
        assert normalize_anatomy(text) == text


# =============================================================================
# Segmentation
# =============================================================================

class TestSegmentation:

    def test_splits_sentences_onto_lines(self):
        out = split_sentences_into_lines("أولًا. ثانيًا! ثالثًا؟ رابعًا?")
        assert out == "أولًا.\nثانيًا!\nثالثًا؟\nرابعًا?"

    def test_line_without_punctuation_kept_whole(self):
        assert split_sentences_into_lines("  سلامتك 🌸  ") == "سلامتك 🌸"

    def test_blank_lines_dropped(self):
        out = split_sentences_into_lines("\n\n  a. b?  \n   \n c\n")
        assert out == "a.\nb?\nc"

    def test_crlf_line_breaks(self):
        assert split_sentences_into_lines("one.\r\ntwo.") == "one.\ntwo."

    def test_punctuation_run_stays_with_sentence(self):
        assert split_sentences_into_lines("Wait... really?!") == "Wait...\nreally?!"

    def test_leading_punctuation_kept(self):
        assert split_into_sentences("...and then") == ["...", "and then"]

    def test_comma_does_not_split(self):
        assert split_sentences_into_lines("إذا كان الألم شديد، يُفضل الطوارئ.") == "إذا كان الألم شديد، يُفضل الطوارئ."

    def test_empty(self):
        assert split_sentences_into_lines("") == ""


class TestCountLines:

    @pytest.mark.parametrize("text,expected", [
        ("", 0),
        ("   \n  ", 0),
        ("one", 1),
        ("a\n\n b \n", 2),
        ("a\r\nb\r\nc", 3),
        (MRI_PERIOD_TEMPLATE, 3),
    ])
    def test_counts_non_empty_lines(self, text, expected):
        assert count_lines(text) == expected


# =============================================================================
# Opening and forbidden phrases
# =============================================================================

class TestOpening:

    @pytest.mark.parametrize("text", [
        "سلامتك 🌸\nنص",
        "مساء الخير 🌸 نص",
        "  \n صباح الخير 🌸",
    ])
    def test_allowed(self, text):
        assert has_allowed_opening(text) is True

    @pytest.mark.parametrize("text", [
        "",
        "سلامتك\nنص",                  # missing flower marker
        "مرحبا سلامتك 🌸",             # not a prefix
        "مساء النور 🌸",
    ])
    def test_rejected(self, text):
        assert has_allowed_opening(text) is False


class TestForbiddenPhrases:

    def test_closing_phrase(self):
        assert contains_forbidden_phrases("إذا احتجتِ أي شي خبريني") is True

    def test_reassurance_phrase(self):
        assert contains_forbidden_phrases("هذا أكيد بسيط") is True

    def test_substring_inside_word_matches(self):
        assert contains_forbidden_phrases("الدورة العادية") is True

    def test_clean_text(self):
        assert contains_forbidden_phrases(MRI_PERIOD_TEMPLATE) is False

    def test_find_returns_closings_then_reassurance(self):
        found = find_forbidden_phrases("أكيد، لا تترددي")
        assert found == ["لا تترددي", "أكيد"]


# =============================================================================
# Scenarios
# =============================================================================

class TestClassifyScenario:

    @pytest.mark.parametrize("label,expected", [
        ("MRI + Period", Scenario.MRI_PERIOD),
        ("Pain + Pregnancy", Scenario.PAIN_PREGNANCY),
        ("Iron Deficiency / Anemia", Scenario.IRON_ANEMIA),
        ("mri + period", Scenario.DEFAULT),
        (" MRI + Period", Scenario.DEFAULT),
        ("Pregnancy & Breastfeeding", Scenario.DEFAULT),
        ("", Scenario.DEFAULT),
    ])
    def test_exact_label_mapping(self, label, expected):
        assert classify_scenario(label) == expected


class TestValidateScenario:

    def test_default_accepts_anything(self):
        assert validate_scenario("أي نص", Scenario.DEFAULT) is True

    def test_mri_requires_template(self):
        assert validate_scenario(MRI_PERIOD_TEMPLATE, Scenario.MRI_PERIOD) is True
        assert validate_scenario(MRI_PERIOD_TEMPLATE + ".", Scenario.MRI_PERIOD) is False

    def test_pain_requires_all_phrases(self):
        text = "لا يمكن التشخيص. الطوارئ. العيادة."
        assert validate_scenario(text, Scenario.PAIN_PREGNANCY) is True
        assert validate_scenario(text.replace("الطوارئ", ""), Scenario.PAIN_PREGNANCY) is False

    def test_pain_rejects_rectal_term(self):
        text = "لا يمكن التشخيص. الطوارئ. العيادة. المستقيم."
        assert validate_scenario(text, Scenario.PAIN_PREGNANCY) is False

    def test_iron_accepts_iv_only(self):
        assert validate_scenario("الحديد الوريدي في العيادة", Scenario.IRON_ANEMIA) is True

    def test_iron_rejects_reassurance(self):
        text = "الحديد الوريدي في العيادة ومن الجيد"
        assert validate_scenario(text, Scenario.IRON_ANEMIA) is False
