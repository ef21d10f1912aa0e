"""
ReplyGuard - Scenario Rules
===========================
Maps a classification label to a Scenario and applies that scenario's
stricter content rules.

Scenario rules run only after the generic opening, line-count and
forbidden-phrase checks have passed.

Scenarios:
- MRI_PERIOD: reply must equal the MRI timing template (after trim)
- PAIN_PREGNANCY: must say it cannot assess, point to emergency and
  clinic, and name no pelvic/rectal anatomy
- IRON_ANEMIA: must mention oral or IV iron, point to the clinic, and
  carry no reassurance
- DEFAULT: no extra rule
"""

from enum import Enum

from .rules import RuleTables, ScenarioRules, DEFAULT_RULES


class Scenario(Enum):
    """Closed set of validation scenarios."""
    MRI_PERIOD = "MRI_PERIOD"
    PAIN_PREGNANCY = "PAIN_PREGNANCY"
    IRON_ANEMIA = "IRON_ANEMIA"
    DEFAULT = "DEFAULT"


def classify_scenario(classification: str, rules: RuleTables = DEFAULT_RULES) -> Scenario:
    """
    Map a classification label to a Scenario by exact string match.

    Unrecognised labels are not rejected; they take the DEFAULT scenario,
    which applies the generic checks only.
    """
    name = rules.label_scenarios.get(classification)
    if name is None:
        return Scenario.DEFAULT
    return Scenario(name)


def _passes(text: str, scenario_rules: ScenarioRules) -> bool:
    """Apply one scenario's template / required / forbidden substrings."""
    if scenario_rules.exact_template and text.strip() != scenario_rules.exact_template.strip():
        return False

    if any(phrase not in text for phrase in scenario_rules.required):
        return False

    if scenario_rules.required_any and not any(
        phrase in text for phrase in scenario_rules.required_any
    ):
        return False

    if any(phrase in text for phrase in scenario_rules.forbidden):
        return False

    return True


def validate_scenario(
    text: str,
    scenario: Scenario,
    rules: RuleTables = DEFAULT_RULES
) -> bool:
    """Check a normalized reply against the rules for its scenario."""
    if scenario is Scenario.DEFAULT:
        return True
    if scenario in (Scenario.MRI_PERIOD, Scenario.PAIN_PREGNANCY, Scenario.IRON_ANEMIA):
        return _passes(text, rules.scenario_rules[scenario.value])
    raise ValueError(f"Unhandled scenario: {scenario}")
