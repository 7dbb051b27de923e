import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from composer_update.domain.errors import CommandError
from composer_update.infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    command: tuple[str, ...]
    exit_code: int | None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return not self.timed_out and self.exit_code == 0

    @property
    def output(self) -> str:
        """Standard output, or standard error when nothing was written to stdout."""
        if self.stdout.strip():
            return self.stdout
        return self.stderr

    def check(self) -> "CommandResult":
        if self.ok:
            return self
        _log_failure_output(self)
        if self.timed_out:
            raise CommandError(
                safe_message(f"Command timed out: {' '.join(self.command)}"),
                timed_out=True,
            )
        raise CommandError(
            safe_message(f"Command failed (exit_code={self.exit_code}): {' '.join(self.command)}"),
            exit_code=self.exit_code,
        )


def _log_failure_output(result: CommandResult) -> None:
    stdout = safe_message(result.stdout.strip()) if result.stdout else ""
    stderr = safe_message(result.stderr.strip()) if result.stderr else ""
    if stdout:
        log_event(logger, logging.ERROR, "repo.command.stdout", output=stdout)
    if stderr:
        log_event(logger, logging.ERROR, "repo.command.stderr", output=stderr)


def _decode(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def execute(
    command: Sequence[str],
    cwd: Path | None = None,
    *,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    log_event(
        logger,
        logging.INFO,
        "repo.command.run",
        command=list(command),
        cwd=str(cwd) if cwd else None,
        timeout=timeout,
    )
    process_env = {**os.environ, **env} if env else None
    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=process_env,
        )
    except subprocess.TimeoutExpired as error:
        return CommandResult(
            command=tuple(command),
            exit_code=None,
            stdout=_decode(error.stdout),
            stderr=_decode(error.stderr),
            timed_out=True,
        )
    return CommandResult(
        command=tuple(command),
        exit_code=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def run(
    command: Sequence[str],
    cwd: Path | None = None,
    *,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    return execute(command, cwd=cwd, timeout=timeout, env=env).check()
