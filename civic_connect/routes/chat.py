"""
Chat assistant endpoint.

Stateless: every POST is routed on its own, with no session or history.
"""

from fastapi import APIRouter
from civic_connect.models.chat import ChatRequest, ChatResponse
from civic_connect.services.chatbot import get_intent_router


router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
def chat(payload: ChatRequest):
    """
    Reply to one chat message.

    Always returns 200 with a reply; unrecognised messages get a
    clarifying fallback rather than an error.
    """
    turn = get_intent_router().respond(payload.message)
    return ChatResponse(intent=turn.intent, reply=turn.reply)
