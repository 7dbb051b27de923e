import logging
from pathlib import Path

from composer_update.infrastructure.observability.logging_utils import log_event
from composer_update.infrastructure.repo.commands import execute, run


logger = logging.getLogger(__name__)

_HEADS_PREFIX = "refs/heads/"


class GitRepository:
    """Thin wrapper over the ``git`` CLI bound to one working tree."""

    def __init__(self, repo_dir: Path, *, remote: str = "origin") -> None:
        self.repo_dir = repo_dir
        self.remote = remote

    def _git(self, *args: str) -> str:
        return run(["git", *args], cwd=self.repo_dir).stdout

    def current_branch(self) -> str:
        return self._git("rev-parse", "--abbrev-ref", "HEAD").strip()

    def list_remote_branches(self) -> list[str] | None:
        result = execute(["git", "ls-remote", "--heads", self.remote], cwd=self.repo_dir)
        if not result.ok:
            log_event(
                logger,
                logging.WARNING,
                "repo.branches.lookup_failed",
                remote=self.remote,
                exit_code=result.exit_code,
            )
            return None

        branches = []
        for line in result.stdout.splitlines():
            _, _, ref = line.partition("\t")
            if ref.startswith(_HEADS_PREFIX):
                branches.append(ref[len(_HEADS_PREFIX):])
        return branches

    def create_branch(self, name: str, checkout: bool = True) -> None:
        if checkout:
            self._git("checkout", "-b", name)
        else:
            self._git("branch", name)

    def checkout(self, name: str) -> None:
        # CI checkouts usually fetch a single ref, so bring the branch in first.
        self._git("fetch", "--quiet", self.remote, f"+{_HEADS_PREFIX}{name}:refs/remotes/{self.remote}/{name}")
        self._git("checkout", "-B", name, f"{self.remote}/{name}")

    def merge(self, branch: str, strategy: str = "theirs", quiet: bool = True) -> None:
        # git has no "theirs" strategy; the default strategy's option resolves
        # conflicts in favour of the branch being merged in.
        args = ["merge", "--no-edit", f"--strategy-option={strategy}"]
        if quiet:
            args.append("--quiet")
        args.append(branch)
        self._git(*args)

    def has_changes(self) -> bool:
        return bool(self._git("status", "--porcelain").strip())

    def add_all(self) -> None:
        self._git("add", "--all")

    def commit(self, message: str) -> None:
        self._git("commit", "-m", message)

    def push(self, remote: str, branch: str, force: bool = False) -> None:
        args = ["push", remote, branch]
        if force:
            args.append("--force")
        self._git(*args)

    def set_remote_url(self, remote: str, url: str) -> None:
        self._git("remote", "set-url", remote, url)

    def set_config(self, key: str, value: str) -> None:
        self._git("config", "--local", key, value)
