"""HabitualOS Signals: agent signal parsing and survey focus package."""

from habitual.config import CONFIG, MODEL_ALIASES, DEFAULT_MODEL, AppConfig
from habitual.domain.models import Signal, SignalSpec, FocusResult
from habitual.domain.signal_parser import (
    AGENT_SIGNALS,
    SignalRegistry,
    has_signal,
    parse_signal,
    registry_for_chat_type,
)
from habitual.domain.focus import compute_focus_dimensions
from habitual.domain.pricing import calculate_cost

__all__ = [
    "CONFIG",
    "MODEL_ALIASES",
    "DEFAULT_MODEL",
    "AppConfig",
    "Signal",
    "SignalSpec",
    "FocusResult",
    "AGENT_SIGNALS",
    "SignalRegistry",
    "has_signal",
    "parse_signal",
    "registry_for_chat_type",
    "compute_focus_dimensions",
    "calculate_cost",
]
