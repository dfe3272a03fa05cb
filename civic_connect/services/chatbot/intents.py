"""
Intent classification for the civic chat assistant.

Keyword rules are checked in a fixed priority order and the first rule with a
trigger substring present in the lowercased utterance wins. There are no word
boundaries: a trigger matches anywhere, so the literals (including the
trailing space in "hi ") are significant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Intent(str, Enum):
    """Closed set of goals a chat utterance can be routed to."""
    GREETING = "greeting"
    HELP = "help"
    RAISE_QUERY = "raise_query"
    TRACK_QUERY = "track_query"
    FILL_REPORT_FORM = "fill_report_form"
    GENERATE_LINK = "generate_link"
    AI_INSIGHTS = "ai_insights"
    LATEST_ISSUES = "latest_issues"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntentRule:
    intent: Intent
    triggers: Tuple[str, ...]

    def matches(self, normalized: str) -> bool:
        return any(trigger in normalized for trigger in self.triggers)


# Priority order matters: "help me find the link" is HELP, not GENERATE_LINK.
INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(Intent.GREETING, ("hello", "hi ", "hey")),
    IntentRule(Intent.HELP, ("help", "what can you do")),
    IntentRule(Intent.RAISE_QUERY, ("raise", "new query", "new issue", "report problem")),
    IntentRule(Intent.TRACK_QUERY, ("track", "status", "existing", "follow up")),
    IntentRule(Intent.FILL_REPORT_FORM, ("fill", "form", "submit report")),
    IntentRule(Intent.GENERATE_LINK, ("link", "page", "website", "url")),
    IntentRule(Intent.AI_INSIGHTS, ("insight", "analytics", "statistics", "data")),
    # "new issues" never wins here: RAISE_QUERY's "new issue" matches first.
    IntentRule(Intent.LATEST_ISSUES, ("latest", "recent", "new issues")),
)


def normalize(utterance: str) -> str:
    """Case-fold an utterance. Punctuation and whitespace are left alone."""
    return (utterance or "").lower()


def match_intent(normalized: str) -> Intent:
    """First rule matching already-normalized text, else UNKNOWN."""
    for rule in INTENT_RULES:
        if rule.matches(normalized):
            return rule.intent
    return Intent.UNKNOWN


def classify_intent(utterance: str) -> Intent:
    """
    Determine the intent of a single utterance.

    Always returns exactly one Intent; UNKNOWN when no rule matches
    (including empty input).
    """
    return match_intent(normalize(utterance))
