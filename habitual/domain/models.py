"""Domain data models: pure Python dataclasses."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Terminal states of a parsed signal
PARSED = "parsed"
PARSE_ERROR = "parse_error"
STRUCTURAL_ERROR = "structural_error"


@dataclass(frozen=True)
class SignalSpec:
    """One registered signal kind: keyword, sentinel pattern and result label."""

    kind: str  # e.g. "GENERATE_ACTIONS"
    label: str  # used in error messages, e.g. "action"
    pattern: re.Pattern = field(default=None, compare=False)

    def __post_init__(self):
        if self.pattern is None:
            object.__setattr__(self, "pattern", sentinel_pattern(self.kind))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def sentinel_pattern(keyword: str) -> re.Pattern:
    """KEYWORD, optional whitespace, newline, then a dashed line."""
    return re.compile(rf"^{re.escape(keyword)}\s*\n---", re.MULTILINE)


@dataclass(frozen=True)
class Signal:
    """Structured instruction extracted from an LLM reply."""

    kind: str
    data: Any = None
    error: Optional[str] = None
    parse_error: Optional[str] = None
    raw: Optional[str] = None
    status: str = PARSED

    @property
    def ok(self) -> bool:
        return self.status == PARSED

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"kind": self.kind, "data": self.data}
        result = {"kind": self.kind, "error": self.error, "raw": self.raw}
        if self.parse_error is not None:
            result["parseError"] = self.parse_error
        return result


@dataclass
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str


@dataclass
class ChatTurn:
    """Result of one agent chat turn."""

    text: str
    visible_text: str
    signal: Optional[Signal] = None


@dataclass
class FocusResult:
    focus_dimensions: List[str]
    combined_scores: Dict[str, Dict[str, float]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "focusDimensions": list(self.focus_dimensions),
            "combinedScores": self.combined_scores,
        }


@dataclass(frozen=True)
class ModelPricing:
    """USD per 1M tokens."""

    input: float
    output: float


@dataclass
class ApiCallRecord:
    timestamp: str
    model: str
    input_tokens: int
    output_tokens: int
    cost: float
    operation: str = "chat"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "model": self.model,
            "inputTokens": self.input_tokens,
            "outputTokens": self.output_tokens,
            "cost": self.cost,
            "operation": self.operation,
        }
