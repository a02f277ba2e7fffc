"""Follow-up chat about an analysis, streamed chunk by chunk."""

import logging
from typing import Any, Iterator, List, Optional

from google.genai import types

from .config import DEFAULT_MODEL
from .errors import ChatFailure
from .gemini_client import get_client
from .models import AnalysisResult, ChatMessage
from .prompts import CHAT_SYSTEM_INSTRUCTION, build_chat_seed

logger = logging.getLogger(__name__)

USER_ROLE = "user"
MODEL_ROLE = "model"
CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."


class ChatSession:
    """A Gemini chat seeded with one analysis. Discard it when a new analysis starts."""

    def __init__(self, chat: Any, result: AnalysisResult):
        self._chat = chat
        self.result = result

    def send_message_stream(self, text: str) -> Iterator[str]:
        """
        Yield reply text deltas in arrival order.
        Raises ChatFailure if the stream cannot be opened or breaks mid-way.
        """
        try:
            for chunk in self._chat.send_message_stream(text):
                delta = getattr(chunk, "text", None)
                if delta:
                    yield delta
        except Exception as exc:
            logger.exception("Error sending chat message")
            raise ChatFailure("Failed to get a reply from the AI model.") from exc


def _seed_history(result: AnalysisResult) -> List[types.Content]:
    user_text, model_text = build_chat_seed(result)
    return [
        types.Content(role=USER_ROLE, parts=[types.Part(text=user_text)]),
        types.Content(role=MODEL_ROLE, parts=[types.Part(text=model_text)]),
    ]


def start_chat(
    result: AnalysisResult,
    client: Optional[Any] = None,
    model: Optional[str] = None,
) -> ChatSession:
    """Open a chat pre-seeded with the analyzed content and the model's assessment."""
    client = client or get_client()
    chat = client.chats.create(
        model=model or DEFAULT_MODEL,
        history=_seed_history(result),
        config=types.GenerateContentConfig(system_instruction=CHAT_SYSTEM_INSTRUCTION),
    )
    logger.info("Follow-up chat started for %s analysis", result.original_type.value)
    return ChatSession(chat, result)


def stream_reply(
    session: ChatSession,
    transcript: List[ChatMessage],
    text: str,
) -> Iterator[List[ChatMessage]]:
    """
    Send text and fold the streamed reply into the transcript.

    Appends the user message and one model message, then overwrites that
    model message after every chunk and yields the transcript. A ChatFailure
    replaces the model message with CHAT_ERROR_MESSAGE instead of propagating,
    so the user's message is kept and the conversation can go on.
    """
    transcript.append(ChatMessage(role=USER_ROLE, text=text))
    reply = ChatMessage(role=MODEL_ROLE, text="")
    transcript.append(reply)
    accumulated = ""
    try:
        for delta in session.send_message_stream(text):
            accumulated += delta
            reply.text = accumulated
            yield transcript
    except ChatFailure:
        reply.text = CHAT_ERROR_MESSAGE
        yield transcript
