"""JSON file-based storage adapter: implements StoragePort."""

import json
import os
import re
import sys
import tempfile
from pathlib import Path

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _log(msg: str):
    print(msg, file=sys.stderr)


class JsonStorage:
    """One JSON list per key, stored as <storage_dir>/<key>.json."""

    def __init__(self, storage_dir: str = "data"):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._storage_dir / f"{key}.json"

    def load(self, key: str) -> list:
        path = self._path(key)
        if not path.exists():
            return []
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _log(f"Failed to load {path.name}: {e}")
            return []
        return raw if isinstance(raw, list) else []

    def save(self, key: str, data: list) -> None:
        path = self._path(key)
        content = json.dumps(data, ensure_ascii=False, indent=2)
        # Atomic write
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, str(path))
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
