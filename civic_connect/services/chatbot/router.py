"""
Intent Router - the civic chat assistant.

DESIGN PRINCIPLES:
- One utterance in, one reply out
- Stateless: no session, no conversation memory
- Deterministic keyword rules, no machine-learned NLP
- Never raises for any text input; unmatched input gets a clarifying reply
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
from civic_connect.core.settings import settings
from civic_connect.services.chatbot import replies
from civic_connect.services.chatbot.intents import Intent, match_intent, normalize
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatTurn:
    """One utterance and the reply it produced."""
    utterance: str
    intent: Intent
    reply: str


class IntentRouter:
    """
    Routes a user utterance to an intent handler and returns its reply.

    All lookup tables are built in the constructor and never mutated, so a
    single instance can serve concurrent callers without locking.
    """

    def __init__(self, site_base_url: Optional[str] = None):
        base_url = (site_base_url or settings.SITE_BASE_URL).rstrip("/")
        self.page_directory: Dict[str, str] = {
            page: f"{base_url}{path}" for page, path in replies.PAGE_PATHS.items()
        }
        self.insight_topics: Dict[str, str] = dict(replies.INSIGHT_TOPICS)

        self._handlers: Dict[Intent, Callable[[str], str]] = {
            Intent.GREETING: self._greeting,
            Intent.HELP: self._help,
            Intent.RAISE_QUERY: self._raise_query,
            Intent.TRACK_QUERY: self._track_query,
            Intent.FILL_REPORT_FORM: self._fill_report_form,
            Intent.GENERATE_LINK: self._generate_link,
            Intent.AI_INSIGHTS: self._ai_insights,
            Intent.LATEST_ISSUES: self._latest_issues,
            Intent.UNKNOWN: self._unknown,
        }
        missing = set(Intent) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No chat handler for intents: {sorted(i.value for i in missing)}")

    def respond(self, utterance: str) -> ChatTurn:
        """
        Classify an utterance and build its reply.

        Args:
            utterance: Raw user text (any case, may be empty)

        Returns:
            ChatTurn with the selected intent and reply text
        """
        normalized = normalize(utterance)
        intent = match_intent(normalized)
        reply = self._handlers[intent](normalized)
        logger.debug(f"Chat intent resolved: {intent.value}")
        return ChatTurn(utterance=utterance or "", intent=intent, reply=reply)

    def handle(self, utterance: str) -> str:
        """Return the reply for a single utterance."""
        return self.respond(utterance).reply

    def extract_page_name(self, normalized: str) -> str:
        """First known page name found in the utterance, else the home page."""
        for page in replies.PAGE_PATHS:
            if page in normalized:
                return page
        return replies.DEFAULT_PAGE

    def generate_link(self, page: str) -> str:
        url = self.page_directory.get(page)
        if url:
            return replies.LINK_REPLY.format(page=page, url=url)
        return replies.LINK_NOT_FOUND_REPLY.format(
            page=page,
            pages=replies.format_page_list(self.page_directory),
        )

    def find_insight(self, normalized: str) -> Optional[str]:
        for topic, insight in self.insight_topics.items():
            if topic in normalized:
                return insight
        return None

    # Handlers. Each receives the normalized utterance.

    def _greeting(self, normalized: str) -> str:
        return replies.GREETING_REPLY

    def _help(self, normalized: str) -> str:
        return replies.HELP_REPLY

    def _raise_query(self, normalized: str) -> str:
        return replies.RAISE_QUERY_REPLY

    def _track_query(self, normalized: str) -> str:
        return replies.TRACK_QUERY_REPLY

    def _fill_report_form(self, normalized: str) -> str:
        return replies.FILL_REPORT_FORM_REPLY.format(report_url=self.page_directory["report"])

    def _generate_link(self, normalized: str) -> str:
        return self.generate_link(self.extract_page_name(normalized))

    def _ai_insights(self, normalized: str) -> str:
        insight = self.find_insight(normalized)
        if insight is None:
            return replies.INSIGHTS_TOPIC_PROMPT
        return f"{replies.INSIGHTS_PREFIX}{insight}"

    def _latest_issues(self, normalized: str) -> str:
        return replies.LATEST_ISSUES_REPLY

    def _unknown(self, normalized: str) -> str:
        return replies.FALLBACK_REPLY


# Global router instance (singleton)
_router: Optional[IntentRouter] = None


def get_intent_router() -> IntentRouter:
    """
    Get or create the global intent router instance.

    Returns:
        IntentRouter: The shared, read-only router
    """
    global _router
    if _router is None:
        _router = IntentRouter()
    return _router


def handle_message(utterance: str) -> str:
    """
    Reply to one chat message.

    This is the main entry point for the chat assistant.
    Never raises for text input.
    """
    return get_intent_router().handle(utterance)
