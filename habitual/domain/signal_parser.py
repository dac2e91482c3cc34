"""Signal parsing: structured payloads trailing an LLM reply.

An agent ends its reply with a sentinel header and a JSON object:

    GENERATE_ACTIONS
    ---
    {
      "title": "Weekly LinkedIn Posts",
      ...
    }

Pure Python, no framework dependencies. Nothing here raises for string
input: a missing JSON object or a broken one comes back as an error Signal.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from habitual.domain.models import (
    PARSE_ERROR,
    STRUCTURAL_ERROR,
    Signal,
    SignalSpec,
)

GENERATE_ACTIONS = "GENERATE_ACTIONS"
GENERATE_ASSET = "GENERATE_ASSET"
STORE_MEASUREMENT = "STORE_MEASUREMENT"
READY_TO_PRACTICE = "READY_TO_PRACTICE"
SAVE_MOMENT = "SAVE_MOMENT"
SEND_REPLY = "SEND_REPLY"


class UnknownChatType(KeyError):
    """Raised when no signal registry is configured for a chat type."""


class SignalRegistry:
    """Ordered, immutable table of signal kinds. First match wins."""

    def __init__(self, specs=()):
        self._specs: Tuple[SignalSpec, ...] = tuple(specs)

    def __iter__(self) -> Iterator[SignalSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, kind: str) -> bool:
        return any(spec.kind == kind for spec in self._specs)

    @property
    def kinds(self) -> List[str]:
        return [spec.kind for spec in self._specs]

    def get(self, kind: str) -> Optional[SignalSpec]:
        for spec in self._specs:
            if spec.kind == kind:
                return spec
        return None

    def register(self, kind: str, label: str) -> "SignalRegistry":
        """Return a new registry with an extra kind appended."""
        if kind in self:
            raise ValueError(f"Signal kind already registered: {kind}")
        return SignalRegistry(self._specs + (SignalSpec(kind=kind, label=label),))

    def classify(self, text: str) -> Optional[SignalSpec]:
        trimmed = text.strip()
        for spec in self._specs:
            if spec.matches(trimmed):
                return spec
        return None

    def has_signal(self, text: str) -> bool:
        return self.classify(text) is not None

    def parse(self, text: str) -> Optional[Signal]:
        spec = self.classify(text)
        if spec is None:
            return None

        lines = text.split("\n")
        json_start = find_json_start(lines)
        if json_start == -1:
            return Signal(
                kind=spec.kind,
                error=f"Could not find JSON object in {spec.kind} response",
                raw=text,
                status=STRUCTURAL_ERROR,
            )

        json_content = extract_json_from_lines(lines, json_start)
        try:
            data = json.loads(json_content, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            return Signal(
                kind=spec.kind,
                error=f"Failed to parse {spec.label} JSON",
                parse_error=str(e),
                raw=json_content,
                status=PARSE_ERROR,
            )
        return Signal(kind=spec.kind, data=data)

    def strip(self, text: str) -> str:
        """Conversational text before the first sentinel header (whole text if none)."""
        trimmed = text.strip()
        starts = [m.start() for m in (spec.pattern.search(trimmed) for spec in self._specs) if m]
        if not starts:
            return trimmed
        return trimmed[: min(starts)].strip()


def _reject_constant(name: str):
    # NaN and Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def find_json_start(lines: List[str]) -> int:
    """Index of the first line starting with '{' (after trimming), or -1."""
    for i, line in enumerate(lines):
        if line.strip().startswith("{"):
            return i
    return -1


def find_json_end(lines: List[str], json_start: int) -> int:
    """Index of the line where the brace count first returns to zero.

    Braces are counted per character, string literals included. If the
    count never balances the span collapses to the start line.
    """
    brace_count = 0
    for i in range(json_start, len(lines)):
        line = lines[i]
        brace_count += line.count("{") - line.count("}")
        if brace_count == 0 and "}" in line:
            return i
    return json_start


def extract_json_from_lines(lines: List[str], json_start: int) -> str:
    json_end = find_json_end(lines, json_start)
    return "\n".join(lines[json_start : json_end + 1])


def format_signal(kind: str, payload: Any, indent: Optional[int] = 2) -> str:
    """Render a signal the way agents are asked to emit it."""
    return f"{kind}\n---\n{json.dumps(payload, indent=indent, ensure_ascii=False)}"


AGENT_SIGNALS = SignalRegistry([
    SignalSpec(kind=GENERATE_ACTIONS, label="action"),
    SignalSpec(kind=GENERATE_ASSET, label="asset"),
    SignalSpec(kind=STORE_MEASUREMENT, label="measurement"),
])

# Signal kinds per chat type
CHAT_TYPE_SIGNALS: Mapping[str, SignalRegistry] = MappingProxyType({
    "agent": AGENT_SIGNALS,
    "fox-ea": SignalRegistry(),  # tools return results directly
    "obi-wai": SignalRegistry([
        SignalSpec(kind=READY_TO_PRACTICE, label="practice"),
    ]),
    "relationship": SignalRegistry([
        SignalSpec(kind=SAVE_MOMENT, label="moment"),
        SignalSpec(kind=STORE_MEASUREMENT, label="measurement"),
        SignalSpec(kind=SEND_REPLY, label="reply"),
    ]),
})


def registry_for_chat_type(chat_type: str) -> SignalRegistry:
    try:
        return CHAT_TYPE_SIGNALS[chat_type]
    except KeyError:
        raise UnknownChatType(chat_type) from None


def parse_signal(text: str) -> Optional[Signal]:
    """Parse an agent reply. None when no sentinel header is present."""
    return AGENT_SIGNALS.parse(text)


def has_signal(text: str) -> bool:
    """Classification only, no extraction or decoding."""
    return AGENT_SIGNALS.has_signal(text)


def strip_signal(text: str, registry: SignalRegistry = AGENT_SIGNALS) -> str:
    return registry.strip(text)
