from typing import Protocol


class VersionControl(Protocol):
    def current_branch(self) -> str:
        ...

    def list_remote_branches(self) -> list[str] | None:
        """Branch names known to ``origin``; ``None`` when the lookup failed."""

    def create_branch(self, name: str, checkout: bool = True) -> None:
        ...

    def checkout(self, name: str) -> None:
        ...

    def merge(self, branch: str, strategy: str = "theirs", quiet: bool = True) -> None:
        ...

    def has_changes(self) -> bool:
        ...

    def add_all(self) -> None:
        ...

    def commit(self, message: str) -> None:
        ...

    def push(self, remote: str, branch: str, force: bool = False) -> None:
        ...

    def set_remote_url(self, remote: str, url: str) -> None:
        ...

    def set_config(self, key: str, value: str) -> None:
        ...
