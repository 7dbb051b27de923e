from composer_update.application.ports.dependency_manager import DependencyManager
from composer_update.application.ports.hosting import HostingApi, PullRequestData
from composer_update.application.ports.vcs import VersionControl

__all__ = [
    "DependencyManager",
    "HostingApi",
    "PullRequestData",
    "VersionControl",
]
