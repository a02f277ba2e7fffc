import pytest

from verity.chat import CHAT_ERROR_MESSAGE, ChatSession, start_chat, stream_reply
from verity.errors import ChatFailure
from verity.models import ChatMessage
from verity.prompts import CHAT_SYSTEM_INSTRUCTION

from conftest import FakeChat, FakeClient


def test_start_chat_seeds_history(sample_result):
    client = FakeClient()
    session = start_chat(sample_result, client=client, model="gemini-test")

    call = client.chats.calls[0]
    assert call["model"] == "gemini-test"
    assert call["config"].system_instruction == CHAT_SYSTEM_INSTRUCTION
    user_turn, model_turn = call["history"]
    assert user_turn.role == "user"
    assert user_turn.parts[0].text.endswith("Drinking bleach cures flu.")
    assert model_turn.role == "model"
    assert "Risk Level: HIGH" in model_turn.parts[0].text
    assert session.result is sample_result


def test_send_message_stream_yields_deltas(sample_result):
    chat = FakeChat(chunks=["Hel", "", None, "lo"])
    session = ChatSession(chat, sample_result)
    assert list(session.send_message_stream("hi")) == ["Hel", "lo"]
    assert chat.sent == ["hi"]


def test_send_message_stream_wraps_errors(sample_result):
    session = ChatSession(FakeChat(error=TimeoutError("slow")), sample_result)
    with pytest.raises(ChatFailure):
        list(session.send_message_stream("hi"))


def test_stream_reply_accumulates_each_chunk_once(sample_result):
    chunks = ["The ", "claim ", "is ", "false."]
    session = ChatSession(FakeChat(chunks=chunks), sample_result)
    transcript = [ChatMessage("user", "earlier"), ChatMessage("model", "answer")]

    snapshots = [t[-1].text for t in stream_reply(session, transcript, "Why?")]

    assert snapshots == ["The ", "The claim ", "The claim is ", "The claim is false."]
    assert len(transcript) == 4
    assert transcript[2] == ChatMessage("user", "Why?")
    assert transcript[3] == ChatMessage("model", "".join(chunks))


def test_stream_reply_failure_appends_apology(sample_result):
    chat = FakeChat(chunks=["partial", "never"], error=RuntimeError("boom"), fail_after=1)
    session = ChatSession(chat, sample_result)
    transcript = []

    updates = list(stream_reply(session, transcript, "Why?"))

    assert updates
    assert transcript == [ChatMessage("user", "Why?"), ChatMessage("model", CHAT_ERROR_MESSAGE)]


def test_stream_reply_failure_on_open(sample_result):
    session = ChatSession(FakeChat(error=ConnectionError("down")), sample_result)
    transcript = []
    list(stream_reply(session, transcript, "hello"))
    assert transcript[-1].text == CHAT_ERROR_MESSAGE
    assert transcript[0].text == "hello"
