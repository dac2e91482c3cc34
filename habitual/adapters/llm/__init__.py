"""LLM adapters: Claude CLI executor."""

from habitual.adapters.llm.claude_adapter import ClaudeAdapter, run_cancellable

__all__ = [
    "ClaudeAdapter",
    "run_cancellable",
]
