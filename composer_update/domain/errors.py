class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


class CommandError(RuntimeError):
    """Raised when an external command exits non-zero or times out."""

    def __init__(self, message: str, *, exit_code: int | None = None, timed_out: bool = False) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.timed_out = timed_out


class GitHubApiError(RuntimeError):
    """Raised when the GitHub API answers with an error status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
