"""Tests for the Claude CLI adapter: subprocess mocked."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from habitual.adapters.llm.claude_adapter import ClaudeAdapter
from habitual.config import MODEL_ALIASES
from habitual.domain.agent import ChatError
from habitual.ports.outbound import LLMPort


def _proc(returncode=0):
    proc = MagicMock()
    proc.returncode = returncode
    return proc


class TestBuildArgs:
    def test_implements_port(self):
        assert isinstance(ClaudeAdapter(), LLMPort)

    def test_minimal(self):
        args = ClaudeAdapter().build_args("hi", session_id="s1")
        assert args == ["claude", "--print", "--session-id", "s1", "--output-format", "text", "hi"]

    def test_model_alias_resolved(self):
        args = ClaudeAdapter().build_args("hi", model="haiku")
        assert args[args.index("--model") + 1] == MODEL_ALIASES["haiku"]

    def test_system_prompt(self):
        args = ClaudeAdapter().build_args("hi", system_prompt="be kind")
        assert args[args.index("--system-prompt") + 1] == "be kind"
        assert args[-1] == "hi"

    def test_generates_session_id(self):
        args = ClaudeAdapter().build_args("hi")
        assert args[args.index("--session-id") + 1]


class TestExecute:
    @pytest.mark.asyncio
    async def test_success(self):
        run = AsyncMock(return_value=(_proc(0), b"  reply text \n", b""))
        with patch("habitual.adapters.llm.claude_adapter.run_cancellable", run):
            result = await ClaudeAdapter(timeout=5).execute("hi")
        assert result == "reply text"
        assert run.call_args.kwargs["timeout"] == 5

    @pytest.mark.asyncio
    async def test_nonzero_exit(self):
        run = AsyncMock(return_value=(_proc(1), b"", b"bad things"))
        with patch("habitual.adapters.llm.claude_adapter.run_cancellable", run):
            with pytest.raises(ChatError, match="Exit code 1: bad things"):
                await ClaudeAdapter().execute("hi")

    @pytest.mark.asyncio
    async def test_timeout(self):
        run = AsyncMock(side_effect=asyncio.TimeoutError())
        with patch("habitual.adapters.llm.claude_adapter.run_cancellable", run):
            with pytest.raises(ChatError, match="Timeout"):
                await ClaudeAdapter(timeout=1).execute("hi")

    @pytest.mark.asyncio
    async def test_missing_binary(self):
        with pytest.raises(ChatError, match="not found"):
            await ClaudeAdapter(binary="definitely-not-a-real-claude-binary").execute("hi")
