from composer_update.domain.branching import plan_working_branch
from composer_update.domain.errors import CommandError, ConfigurationError, GitHubApiError
from composer_update.domain.models import PullRequestIntent, UpdateResult, WorkingBranch
from composer_update.domain.output_filter import filter_output

__all__ = [
    "CommandError",
    "ConfigurationError",
    "GitHubApiError",
    "PullRequestIntent",
    "UpdateResult",
    "WorkingBranch",
    "filter_output",
    "plan_working_branch",
]
