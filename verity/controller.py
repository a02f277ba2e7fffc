"""Application state for one browser session: current analysis, chat session, transcript."""

import logging
from enum import Enum
from typing import Any, Iterator, List, Optional, Union

from .analyzer import analyze_content
from .chat import start_chat, stream_reply
from .errors import AnalysisFailure
from .models import AnalysisResult, ChatMessage, ContentType
from .utils import is_empty_input

logger = logging.getLogger(__name__)


class AnalysisStatus(str, Enum):
    """Where the analyze flow currently is."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    RESULT = "result"
    FAILED = "failed"


class AnalysisController:
    """
    Owns the active result/session pair and moves it through
    IDLE -> ANALYZING -> RESULT | FAILED. A new submission replaces the
    result, chat session and transcript wholesale.
    """

    def __init__(self, client: Optional[Any] = None, model: Optional[str] = None):
        self.client = client
        self.model = model
        self.status = AnalysisStatus.IDLE
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self.session = None
        self.transcript: List[ChatMessage] = []
        self.chat_pending = False

    @property
    def is_analyzing(self) -> bool:
        return self.status is AnalysisStatus.ANALYZING

    def reset(self) -> None:
        """Drop the current result and chat session."""
        self.status = AnalysisStatus.IDLE
        self.result = None
        self.error = None
        self.session = None
        self.transcript = []
        self.chat_pending = False

    def submit(
        self, content: str, content_type: Union[ContentType, str]
    ) -> Optional[AnalysisResult]:
        """
        Run one analysis and open its follow-up chat.
        Returns the result, or None if the input was empty or analysis failed
        (see self.error). Raises RuntimeError if an analysis is already running.
        """
        kind = ContentType(content_type)
        if self.is_analyzing:
            raise RuntimeError("An analysis is already in progress.")
        if is_empty_input(content):
            self.error = f"Please enter a {kind.value} to analyze."
            return None

        self.reset()
        self.status = AnalysisStatus.ANALYZING
        try:
            result = analyze_content(content, kind, client=self.client, model=self.model)
        except AnalysisFailure:
            return self._fail(kind)
        except Exception:
            self.status = AnalysisStatus.IDLE
            raise

        try:
            session = start_chat(result, client=self.client, model=self.model)
        except Exception:
            logger.exception("Error starting follow-up chat")
            return self._fail(kind)

        self.result = result
        self.session = session
        self.status = AnalysisStatus.RESULT
        return result

    def _fail(self, kind: ContentType) -> None:
        self.status = AnalysisStatus.FAILED
        self.result = None
        self.session = None
        self.error = f"An error occurred while analyzing the {kind.value}. Please try again."

    def send_message(self, text: str) -> Iterator[List[ChatMessage]]:
        """
        Stream a follow-up reply into the transcript, yielding it after each chunk.
        Does nothing without an active session, while another reply is
        streaming, or for blank text.
        """
        if self.session is None or self.chat_pending or is_empty_input(text):
            return
        self.chat_pending = True
        try:
            yield from stream_reply(self.session, self.transcript, text)
        finally:
            self.chat_pending = False
