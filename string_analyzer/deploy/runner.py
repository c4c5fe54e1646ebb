# This file wraps subprocess execution for the deployment steps.
# Every command is logged with secrets masked, and its output is forwarded to the deploy log.

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

COMMAND_LOGGER_NAME = "deploy.commands"
LOGGER = logging.getLogger(COMMAND_LOGGER_NAME)


class DeployError(RuntimeError):
    """Raised when a deployment step fails."""


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    def __init__(self, *, secrets: Sequence[str] = ()) -> None:
        self._secrets = tuple(secret for secret in secrets if secret)

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, "***")
        return text

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        input_text: str | None = None,
        check: bool = True,
    ) -> CommandResult:
        display = self.redact(" ".join(args))
        LOGGER.debug("$ %s", display)
        try:
            completed = subprocess.run(
                list(args),
                cwd=cwd,
                input=input_text,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise DeployError(f"Could not execute {args[0]!r}: {exc}") from exc

        result = CommandResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        for line in (result.stdout + result.stderr).splitlines():
            LOGGER.debug("%s", self.redact(line))

        if check and not result.ok:
            raise DeployError(f"Command failed with exit code {result.returncode}: {display}")
        return result
