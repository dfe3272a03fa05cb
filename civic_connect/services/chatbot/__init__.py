"""
Civic chat assistant.

Keyword-driven intent routing with canned replies:
- Stateless, one utterance per call
- Fixed rule priority, first match wins
- Unknown input gets a clarifying fallback, never an error
"""

from civic_connect.services.chatbot.intents import Intent, IntentRule, INTENT_RULES, classify_intent, match_intent
from civic_connect.services.chatbot.router import ChatTurn, IntentRouter, get_intent_router, handle_message

__all__ = [
    "ChatTurn",
    "Intent",
    "IntentRule",
    "INTENT_RULES",
    "IntentRouter",
    "classify_intent",
    "match_intent",
    "get_intent_router",
    "handle_message",
]
