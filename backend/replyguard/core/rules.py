"""
ReplyGuard - Reply Rule Tables
==============================
Static vocabulary and templates that every drafted reply is checked against.

The tables are built once at import time into an immutable RuleTables
instance (DEFAULT_RULES) and shared by reference with every check.
Nothing in the service mutates them, so concurrent requests can read
them without coordination.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

# Approved clinical wording for the lower back / buttocks region
CANONICAL_ANATOMY_TERM = "أسفل الظهر"

# Colloquial terms rewritten to CANONICAL_ANATOMY_TERM, applied in order
ANATOMY_SYNONYMS: Tuple[str, ...] = (
    "صرمي", "طيزي", "طيز", "مؤخرتي", "مؤخرة",
    "خلفيتي", "خلفية", "دبري",
)

FORBIDDEN_CLOSINGS: Tuple[str, ...] = (
    "يحتاج انتباه", "يحتاج متابعة", "مهم نتابع", "لا تهملي",
    "شكرًا لتواصلك", "أتمنى لك الصحة والعافية",
    "لا تترددي", "خبريني", "إذا احتجتِ",
)

FORBIDDEN_REASSURANCE: Tuple[str, ...] = (
    "عادي", "لا يؤثر", "لا مشكلة", "أكيد",
    "من الجيد", "الوضع مطمئن",
)

ALLOWED_OPENINGS: Tuple[str, ...] = (
    "سلامتك 🌸",
    "مساء الخير 🌸",
    "صباح الخير 🌸",
)

# Period, ASCII question mark, exclamation mark, Arabic question mark
TERMINAL_PUNCTUATION = ".?!؟"

MIN_REPLY_LINES = 3
MAX_REPLY_LINES = 4


# ---------------------------------------------------------------------------
# Scenario templates
# ---------------------------------------------------------------------------

MRI_PERIOD_TEMPLATE = (
    "سلامتك 🌸\n"
    "يُفضل تعملي الرنين بعد انتهاء الدورة.\n"
    "غالبًا اليوم الخامس أو السادس هيك بتكون النتيجة أدق."
)

CANNOT_ASSESS = "لا يمكن"
EMERGENCY = "الطوارئ"
CLINIC = "العيادة"
ORAL_ROUTE = "عن طريق الفم"
INTRAVENOUS = "الوريدي"

# Pelvis, posterior, anal, rectal
PAIN_PREGNANCY_FORBIDDEN: Tuple[str, ...] = ("الحوض", "المؤخرة", "الشرج", "المستقيم")

# "It is good", "the situation is reassuring"
IRON_ANEMIA_FORBIDDEN: Tuple[str, ...] = ("من الجيد", "الوضع مطمئن")


# ---------------------------------------------------------------------------
# Classification labels
# ---------------------------------------------------------------------------

LABEL_MRI_PERIOD = "MRI + Period"
LABEL_PAIN_PREGNANCY = "Pain + Pregnancy"
LABEL_IRON_ANEMIA = "Iron Deficiency / Anemia"

# Choices offered by the drafting UI, followed by the scenario labels
KNOWN_CLASSIFICATIONS: Tuple[str, ...] = (
    "Pregnancy & Breastfeeding",
    LABEL_IRON_ANEMIA,
    "Medication Safety",
    "General Gynecology",
    LABEL_MRI_PERIOD,
    LABEL_PAIN_PREGNANCY,
)


@dataclass(frozen=True)
class ScenarioRules:
    """Content rules layered on top of the generic checks for one scenario."""
    exact_template: str = ""                       # Reply must equal this when set
    required: Tuple[str, ...] = ()                 # Every entry must appear
    required_any: Tuple[str, ...] = ()             # At least one must appear
    forbidden: Tuple[str, ...] = ()                # None may appear


@dataclass(frozen=True)
class RuleTables:
    """Read-only rule set shared by every validation pass."""
    anatomy_synonyms: Tuple[str, ...] = ANATOMY_SYNONYMS
    canonical_anatomy_term: str = CANONICAL_ANATOMY_TERM
    forbidden_closings: Tuple[str, ...] = FORBIDDEN_CLOSINGS
    forbidden_reassurance: Tuple[str, ...] = FORBIDDEN_REASSURANCE
    allowed_openings: Tuple[str, ...] = ALLOWED_OPENINGS
    min_lines: int = MIN_REPLY_LINES
    max_lines: int = MAX_REPLY_LINES
    scenario_rules: Mapping[str, ScenarioRules] = field(
        default_factory=lambda: MappingProxyType({
            "MRI_PERIOD": ScenarioRules(exact_template=MRI_PERIOD_TEMPLATE),
            "PAIN_PREGNANCY": ScenarioRules(
                required=(CANNOT_ASSESS, EMERGENCY, CLINIC),
                forbidden=PAIN_PREGNANCY_FORBIDDEN,
            ),
            "IRON_ANEMIA": ScenarioRules(
                required=(CLINIC,),
                required_any=(ORAL_ROUTE, INTRAVENOUS),
                forbidden=IRON_ANEMIA_FORBIDDEN,
            ),
        })
    )
    label_scenarios: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({
            LABEL_MRI_PERIOD: "MRI_PERIOD",
            LABEL_PAIN_PREGNANCY: "PAIN_PREGNANCY",
            LABEL_IRON_ANEMIA: "IRON_ANEMIA",
        })
    )

    @property
    def forbidden_phrases(self) -> Tuple[str, ...]:
        """Closing phrases followed by reassurance phrases."""
        return self.forbidden_closings + self.forbidden_reassurance


DEFAULT_RULES = RuleTables()
