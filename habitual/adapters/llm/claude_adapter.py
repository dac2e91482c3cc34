"""Claude CLI adapter: implements LLMPort."""

import asyncio
import sys
import uuid
from datetime import datetime
from typing import Optional

from habitual.config import CONFIG, MODEL_ALIASES
from habitual.domain.agent import ChatError


def _log(msg: str):
    print(msg, file=sys.stderr)


async def run_cancellable(args, timeout: float):
    """Run a subprocess, killing it on timeout or cancellation."""
    proc = await asyncio.create_subprocess_exec(
        *args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except (asyncio.TimeoutError, asyncio.CancelledError):
        proc.kill()
        await proc.wait()
        raise
    return proc, stdout, stderr


class ClaudeAdapter:
    """Executes Claude CLI commands. Implements LLMPort protocol."""

    def __init__(self, timeout: Optional[float] = None, binary: str = "claude"):
        self.timeout = timeout if timeout is not None else CONFIG["claude_timeout_seconds"]
        self.binary = binary

    def build_args(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        session_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> list:
        args = [
            self.binary, "--print",
            "--session-id", session_id or str(uuid.uuid4()),
            "--output-format", "text",
        ]
        if model:
            args.extend(["--model", MODEL_ALIASES.get(model, model)])
        if system_prompt:
            args.extend(["--system-prompt", system_prompt])
        args.append(message)
        return args

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        session_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        _log(f"[{datetime.now().isoformat()}] Executing with Claude CLI")
        args = self.build_args(message, system_prompt, session_id, model)

        try:
            proc, stdout, stderr = await run_cancellable(args, timeout=self.timeout)
        except asyncio.TimeoutError:
            raise ChatError(f"Timeout ({self.timeout:g}s)") from None
        except FileNotFoundError:
            raise ChatError(f"Claude CLI not found: {self.binary}") from None

        if proc.returncode != 0:
            raise ChatError(f"Exit code {proc.returncode}: {stderr.decode(errors='replace')}")
        _log(f"[{datetime.now().isoformat()}] Completed")
        return stdout.decode("utf-8").strip()
