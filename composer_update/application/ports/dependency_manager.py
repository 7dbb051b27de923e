from typing import Protocol, Sequence


class DependencyManager(Protocol):
    def install(self) -> str:
        """Install locked dependencies and return the captured output."""

    def update(self, packages: Sequence[str] = (), with_dependencies: bool = False) -> str:
        """Update dependencies and return the captured output."""

    def set_token(self, token: str) -> None:
        """Configure the token used for private package sources."""
