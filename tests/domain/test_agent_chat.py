"""Tests for domain/agent.py: AgentChat with mock ports only."""

import pytest

from habitual.domain.agent import AgentChat, ChatError
from habitual.domain.models import ChatMessage, PARSE_ERROR
from habitual.domain.persona import AGENT_PERSONA
from habitual.domain.signal_parser import registry_for_chat_type


# --- Mock Ports ---


class MockLLM:
    """Mock LLMPort implementation."""

    def __init__(self, response="mock response"):
        self.response = response
        self.calls = []

    async def execute(self, message, system_prompt=None, session_id=None, model=None):
        self.calls.append({
            "message": message,
            "system_prompt": system_prompt,
            "session_id": session_id,
            "model": model,
        })
        return self.response


class FailingLLM:
    async def execute(self, message, system_prompt=None, session_id=None, model=None):
        raise RuntimeError("boom")


class TestBuildContext:
    def test_message_only(self):
        chat = AgentChat(llm=MockLLM())
        assert chat.build_context("hello") == "user: hello"

    def test_includes_history(self):
        chat = AgentChat(llm=MockLLM())
        history = [ChatMessage("user", "hi"), ChatMessage("assistant", "hey")]
        context = chat.build_context("next", history)
        assert context.startswith("Previous conversation:\nuser: hi\nassistant: hey")
        assert context.endswith("user: next")

    def test_history_bounded(self):
        chat = AgentChat(llm=MockLLM(), max_history=2)
        history = [ChatMessage("user", f"m{i}") for i in range(5)]
        context = chat.build_context("x", history)
        assert "m2" not in context
        assert "m3" in context and "m4" in context

    def test_zero_history(self):
        chat = AgentChat(llm=MockLLM(), max_history=0)
        assert chat.build_context("x", [ChatMessage("user", "old")]) == "user: x"


class TestRespond:
    @pytest.mark.asyncio
    async def test_conversational_reply(self):
        llm = MockLLM("How did today go?")
        turn = await AgentChat(llm=llm, model="sonnet", session_id="s1").respond("hi")
        assert turn.text == "How did today go?"
        assert turn.visible_text == "How did today go?"
        assert turn.signal is None
        assert llm.calls[0]["system_prompt"] == AGENT_PERSONA
        assert llm.calls[0]["model"] == "sonnet"
        assert llm.calls[0]["session_id"] == "s1"

    @pytest.mark.asyncio
    async def test_reply_with_signal(self):
        reply = 'Scheduled!\n\nGENERATE_ACTIONS\n---\n{\n  "title": "Weekly review"\n}'
        turn = await AgentChat(llm=MockLLM(reply)).respond("plan my week")
        assert turn.signal.kind == "GENERATE_ACTIONS"
        assert turn.signal.data == {"title": "Weekly review"}
        assert turn.visible_text == "Scheduled!"

    @pytest.mark.asyncio
    async def test_malformed_signal_returned_as_data(self, capsys):
        turn = await AgentChat(llm=MockLLM("GENERATE_ASSET\n---\n{bad json")).respond("x")
        assert turn.signal.status == PARSE_ERROR
        assert "Malformed GENERATE_ASSET signal" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_chat_type_registry(self):
        chat = AgentChat(llm=MockLLM("SAVE_MOMENT\n---\n{}"), registry=registry_for_chat_type("relationship"))
        turn = await chat.respond("we went hiking")
        assert turn.signal.kind == "SAVE_MOMENT"

    @pytest.mark.asyncio
    async def test_llm_failure_raises_chat_error(self):
        with pytest.raises(ChatError, match="boom"):
            await AgentChat(llm=FailingLLM()).respond("x")

    @pytest.mark.asyncio
    async def test_no_llm(self):
        with pytest.raises(ChatError):
            await AgentChat().respond("x")
