"""Port interfaces (Hexagonal Architecture)."""

from habitual.ports.outbound import LLMPort, StoragePort

__all__ = [
    "LLMPort",
    "StoragePort",
]
