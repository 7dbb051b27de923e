from dataclasses import dataclass


BRANCH_MODE_FRESH = "fresh"
BRANCH_MODE_REUSED = "reused"
BRANCH_MODE_MERGED = "merged"


@dataclass(frozen=True)
class WorkingBranch:
    name: str
    base: str
    exists_on_remote: bool
    mode: str

    @property
    def needs_creation(self) -> bool:
        return self.mode == BRANCH_MODE_FRESH

    @property
    def needs_merge(self) -> bool:
        return self.mode == BRANCH_MODE_MERGED


@dataclass(frozen=True)
class UpdateResult:
    raw_output: str
    summary_lines: tuple[str, ...]

    @property
    def summary(self) -> str:
        return "\n".join(self.summary_lines) + "\n"


@dataclass(frozen=True)
class PullRequestIntent:
    base: str
    head: str
    title: str
    body: str
    suppress: bool = False
