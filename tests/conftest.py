"""Fake Gemini client used across tests (no network)."""

from types import SimpleNamespace

import pytest

from verity.models import AnalysisResult, ContentType, GroundingSource, RiskLevel


def make_response(text, chunks=None):
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


def web_chunk(uri, title=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeChat:
    def __init__(self, chunks=None, error=None, fail_after=None):
        self.chunks = chunks or []
        self.error = error
        self.fail_after = fail_after
        self.sent = []

    def send_message_stream(self, message):
        self.sent.append(message)
        if self.error is not None and self.fail_after is None:
            raise self.error
        return self._iterate()

    def _iterate(self):
        for i, text in enumerate(self.chunks):
            if self.fail_after is not None and i == self.fail_after:
                raise self.error
            yield SimpleNamespace(text=text)


class FakeChats:
    def __init__(self, chat=None):
        self.chat = chat or FakeChat()
        self.calls = []

    def create(self, model, history, config):
        self.calls.append({"model": model, "history": history, "config": config})
        return self.chat


class FakeClient:
    def __init__(self, response=None, error=None, chat=None):
        self.models = FakeModels(response=response, error=error)
        self.chats = FakeChats(chat=chat)


STRUCTURED_REPLY = (
    "Risk Level: HIGH\n"
    "Summary: This claim is false.\n"
    "Detailed Analysis:\n"
    "- No citation provided\n"
    "- Contradicts WHO data"
)


@pytest.fixture
def structured_reply():
    return STRUCTURED_REPLY


@pytest.fixture
def sample_result():
    return AnalysisResult(
        risk_level=RiskLevel.HIGH,
        summary="This claim is false.",
        details=["No citation provided", "Contradicts WHO data"],
        sources=[GroundingSource(uri="https://who.int/a", title="WHO")],
        original_content="Drinking bleach cures flu.",
        original_type=ContentType.TEXT,
    )
