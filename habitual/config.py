"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
import uuid
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

MODEL_ALIASES = {
    "opus": os.getenv("CLAUDE_MODEL_OPUS", "claude-opus-4-5"),
    "sonnet": os.getenv("CLAUDE_MODEL_SONNET", "claude-sonnet-4-5-20250929"),
    "haiku": os.getenv("CLAUDE_MODEL_HAIKU", "claude-haiku-4-5-20251001"),
}

DEFAULT_MODEL = os.getenv("AI_DEFAULT_MODEL", "sonnet").strip().lower()
if DEFAULT_MODEL not in MODEL_ALIASES:
    _stderr_print(f"Unsupported AI_DEFAULT_MODEL={DEFAULT_MODEL!r}, falling back to 'sonnet'")
    DEFAULT_MODEL = "sonnet"

SUPPORTED_CHAT_TYPES = ("agent", "fox-ea", "obi-wai", "relationship")
DEFAULT_CHAT_TYPE = os.getenv("HABITUAL_CHAT_TYPE", "agent").strip().lower()
if DEFAULT_CHAT_TYPE not in SUPPORTED_CHAT_TYPES:
    _stderr_print(f"Unsupported HABITUAL_CHAT_TYPE={DEFAULT_CHAT_TYPE!r}, falling back to 'agent'")
    DEFAULT_CHAT_TYPE = "agent"

CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    "session_id": str(uuid.uuid4()),
    "chat_type": DEFAULT_CHAT_TYPE,
    "data_dir": os.getenv("HABITUAL_DATA_DIR", "data"),
    # Claude CLI call timeout
    "claude_timeout_seconds": float(os.getenv("CLAUDE_TIMEOUT_SECONDS", "20")),
    # Messages of prior conversation sent with each chat turn
    "max_history": 10,
}


# ── Typed config ──────────────────────────────────────


@dataclass
class LLMConfig:
    default_model: str = "sonnet"
    timeout_seconds: float = 20.0
    max_history: int = 10

    def resolve_model(self, alias: str = "") -> str:
        """Map an alias (opus/sonnet/haiku) to a full model id; pass ids through."""
        alias = (alias or self.default_model).strip().lower()
        return MODEL_ALIASES.get(alias, alias)


@dataclass
class StorageConfig:
    data_dir: str = "data"
    api_calls_key: str = "api_calls"


@dataclass
class AppConfig:
    """Typed configuration built from CONFIG."""

    port: int = 3000
    session_id: str = ""
    chat_type: str = "agent"
    llm: LLMConfig = field(default_factory=LLMConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            session_id=CONFIG["session_id"],
            chat_type=CONFIG["chat_type"],
            llm=LLMConfig(
                default_model=DEFAULT_MODEL,
                timeout_seconds=CONFIG["claude_timeout_seconds"],
                max_history=CONFIG["max_history"],
            ),
            storage=StorageConfig(data_dir=CONFIG["data_dir"]),
        )
