"""AgentChat: one LLM turn plus signal parsing, no framework dependencies."""

import sys
from typing import List, Optional

from habitual.domain.models import ChatMessage, ChatTurn
from habitual.domain.persona import AGENT_PERSONA
from habitual.domain.signal_parser import AGENT_SIGNALS, SignalRegistry
from habitual.ports.outbound import LLMPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class ChatError(Exception):
    """Raised when the LLM call for a chat turn fails."""


class AgentChat:
    """Runs a chat turn against an LLMPort and extracts any trailing signal."""

    def __init__(
        self,
        llm: Optional[LLMPort] = None,
        registry: SignalRegistry = AGENT_SIGNALS,
        system_prompt: str = AGENT_PERSONA,
        model: Optional[str] = None,
        session_id: Optional[str] = None,
        max_history: int = 10,
    ):
        self.llm = llm
        self.registry = registry
        self.system_prompt = system_prompt
        self.model = model
        self.session_id = session_id
        self._max_history = max_history

    def build_context(self, message: str, history: Optional[List[ChatMessage]] = None) -> str:
        """Build the LLM message from recent history plus the new user message."""
        parts = []
        recent = (history or [])[-self._max_history:] if self._max_history > 0 else []
        if recent:
            lines = [f"{m.role}: {m.content}" for m in recent]
            parts.append("Previous conversation:\n" + "\n".join(lines))
        parts.append(f"user: {message}")
        return "\n\n".join(parts)

    async def respond(self, message: str, history: Optional[List[ChatMessage]] = None) -> ChatTurn:
        if self.llm is None:
            raise ChatError("No LLM configured")

        prompt = self.build_context(message, history)
        try:
            text = await self.llm.execute(
                prompt,
                system_prompt=self.system_prompt,
                session_id=self.session_id,
                model=self.model,
            )
        except ChatError:
            raise
        except Exception as e:
            raise ChatError(f"LLM call failed: {e}") from e

        signal = self.registry.parse(text)
        if signal is not None:
            if signal.ok:
                _log(f"Signal received: {signal.kind}")
            else:
                _log(f"Malformed {signal.kind} signal: {signal.error}")

        return ChatTurn(text=text, visible_text=self.registry.strip(text), signal=signal)
