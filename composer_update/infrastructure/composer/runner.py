import logging
from pathlib import Path
from typing import Sequence

from composer_update.infrastructure.observability.logging_utils import log_event
from composer_update.infrastructure.repo.commands import execute


logger = logging.getLogger(__name__)

UPDATE_TIMEOUT_SECONDS = 600
TOKEN_TIMEOUT_SECONDS = 60
COMPOSER_ENV = {"COMPOSER_MEMORY_LIMIT": "-1"}


class ComposerRunner:
    def __init__(self, composer_dir: Path, *, executable: str = "composer") -> None:
        self.composer_dir = composer_dir
        self.executable = executable

    def _run(self, arguments: Sequence[str], *, timeout: int) -> str:
        command = [self.executable, *arguments]
        log_event(logger, logging.INFO, "composer.command.run", operation=arguments[0], timeout=timeout)
        result = execute(command, cwd=self.composer_dir, timeout=timeout, env=COMPOSER_ENV)
        return result.check().output

    def install(self) -> str:
        return self._run(["install"], timeout=UPDATE_TIMEOUT_SECONDS)

    def update(self, packages: Sequence[str] = (), with_dependencies: bool = False) -> str:
        arguments = ["update", *packages]
        if with_dependencies:
            arguments.append("--with-dependencies")
        return self._run(arguments, timeout=UPDATE_TIMEOUT_SECONDS)

    def set_token(self, token: str) -> None:
        self._run(
            ["config", "--global", "github-oauth.github.com", token],
            timeout=TOKEN_TIMEOUT_SECONDS,
        )
