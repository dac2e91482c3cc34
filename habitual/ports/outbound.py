"""Outbound ports: interfaces for external system adapters."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LLMPort(Protocol):
    """Interface for LLM execution backends."""

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        session_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str: ...


@runtime_checkable
class StoragePort(Protocol):
    """Interface for persistent storage."""

    def load(self, key: str) -> list: ...
    def save(self, key: str, data: list) -> None: ...
