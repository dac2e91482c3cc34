"""Domain layer: pure Python, no framework dependencies."""

from habitual.domain.models import Signal, SignalSpec, ChatMessage, ChatTurn, FocusResult
from habitual.domain.signal_parser import (
    AGENT_SIGNALS,
    CHAT_TYPE_SIGNALS,
    SignalRegistry,
    UnknownChatType,
    format_signal,
    has_signal,
    parse_signal,
    registry_for_chat_type,
    strip_signal,
)
from habitual.domain.agent import AgentChat, ChatError
from habitual.domain.focus import compute_focus_dimensions, scores_from_responses
from habitual.domain.persona import AGENT_PERSONA

__all__ = [
    "Signal",
    "SignalSpec",
    "ChatMessage",
    "ChatTurn",
    "FocusResult",
    "AGENT_SIGNALS",
    "CHAT_TYPE_SIGNALS",
    "SignalRegistry",
    "UnknownChatType",
    "format_signal",
    "has_signal",
    "parse_signal",
    "registry_for_chat_type",
    "strip_signal",
    "AgentChat",
    "ChatError",
    "compute_focus_dimensions",
    "scores_from_responses",
    "AGENT_PERSONA",
]
