"""Adapters: LLM, storage and web."""
