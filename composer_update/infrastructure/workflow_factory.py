from composer_update.application.update_flow import UpdateFlowConfig, UpdateFlowDependencies
from composer_update.infrastructure.composer.runner import ComposerRunner
from composer_update.infrastructure.git.repository import GitRepository
from composer_update.infrastructure.github.github_client import GitHubClient
from composer_update.infrastructure.observability.workflow_observer import (
    observe_update_result,
    observe_workflow_step,
)
from composer_update.infrastructure.repo.manifest import manifest_exists


def build_update_flow_dependencies(config: UpdateFlowConfig) -> UpdateFlowDependencies:
    return UpdateFlowDependencies(
        git=GitRepository(config.workspace_directory),
        hosting=GitHubClient(
            token=config.token,
            owner=config.repository_owner,
            repo=config.repository_name,
        ),
        composer=ComposerRunner(config.composer_directory),
        manifest_exists=manifest_exists,
        observe_update=observe_update_result,
        observe_step=observe_workflow_step,
    )
