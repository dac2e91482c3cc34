"""Storage adapters."""

from habitual.adapters.storage.json_store import JsonStorage

__all__ = ["JsonStorage"]
