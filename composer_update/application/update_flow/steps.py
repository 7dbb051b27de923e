from datetime import date

from composer_update.application.update_flow.contracts import (
    DEFAULT_REMOTE,
    UpdateFlowConfig,
    UpdateFlowDependencies,
    UpdateFlowResult,
)
from composer_update.domain.branching import plan_working_branch
from composer_update.domain.models import PullRequestIntent, UpdateResult, WorkingBranch
from composer_update.domain.output_filter import filter_output


MERGE_STRATEGY = "theirs"


def manifest_present(config: UpdateFlowConfig, dependencies: UpdateFlowDependencies) -> bool:
    return dependencies.manifest_exists(config.composer_directory)


def prepare_session(config: UpdateFlowConfig, dependencies: UpdateFlowDependencies) -> None:
    # Authentication must succeed before any branch is touched.
    dependencies.hosting.authenticate()
    dependencies.git.set_remote_url(DEFAULT_REMOTE, config.remote_url)
    dependencies.git.set_config("user.name", config.git_author_name)
    dependencies.git.set_config("user.email", config.git_author_email)


def reconcile_working_branch(
    config: UpdateFlowConfig,
    dependencies: UpdateFlowDependencies,
) -> WorkingBranch:
    git = dependencies.git
    parent_branch = git.current_branch()
    remote_branches = git.list_remote_branches() if config.single_branch else None

    working_branch = plan_working_branch(
        parent_branch,
        single_branch=config.single_branch,
        postfix=config.single_branch_postfix,
        remote_branches=remote_branches,
        suffix_factory=dependencies.suffix_factory,
    )

    if working_branch.needs_creation:
        git.create_branch(working_branch.name, checkout=True)
    elif working_branch.needs_merge:
        git.checkout(working_branch.name)
        git.merge(parent_branch, strategy=MERGE_STRATEGY, quiet=True)
    return working_branch


def configure_dependency_token(config: UpdateFlowConfig, dependencies: UpdateFlowDependencies) -> None:
    dependencies.composer.set_token(config.token)


def run_dependency_update(config: UpdateFlowConfig, dependencies: UpdateFlowDependencies) -> UpdateResult:
    dependencies.composer.install()
    output = dependencies.composer.update(
        config.packages,
        with_dependencies=config.with_dependencies,
    )
    update_result = filter_output(output)
    dependencies.observe_update(update_result)
    return update_result


def build_commit_message(config: UpdateFlowConfig, update_result: UpdateResult, today: date) -> str:
    return f"{config.commit_prefix}composer update {today.isoformat()}\n\n{update_result.summary}"


def commit_and_push(
    config: UpdateFlowConfig,
    dependencies: UpdateFlowDependencies,
    working_branch: WorkingBranch,
    update_result: UpdateResult,
    today: date,
) -> None:
    git = dependencies.git
    git.add_all()
    git.commit(build_commit_message(config, update_result, today))
    # Force is required: single-branch mode pushes over the previous run's branch.
    git.push(DEFAULT_REMOTE, working_branch.name, force=True)


def pull_request_base(config: UpdateFlowConfig, working_branch: WorkingBranch) -> str:
    if not config.source_ref:
        return working_branch.base
    return config.source_ref.rsplit("/", 1)[-1]


def build_pull_request_title(config: UpdateFlowConfig, today: date) -> str:
    # Single-branch titles stay stable so the reused pull request keeps its name.
    if config.single_branch:
        return f"{config.commit_prefix}Composer update"
    return f"{config.commit_prefix}Composer update {today.isoformat()}"


def build_pull_request_intent(
    config: UpdateFlowConfig,
    dependencies: UpdateFlowDependencies,
    working_branch: WorkingBranch,
    update_result: UpdateResult,
    today: date,
) -> PullRequestIntent:
    suppress = False
    if config.single_branch:
        open_pull_requests = dependencies.hosting.list_pull_requests(
            base=working_branch.base,
            state="open",
        )
        suppress = len(open_pull_requests) > 0

    return PullRequestIntent(
        base=pull_request_base(config, working_branch),
        head=working_branch.name,
        title=build_pull_request_title(config, today),
        body=update_result.summary,
        suppress=suppress,
    )


def open_pull_request(dependencies: UpdateFlowDependencies, intent: PullRequestIntent) -> str | None:
    if intent.suppress:
        return None
    pull_request = dependencies.hosting.create_pull_request(
        base=intent.base,
        head=intent.head,
        title=intent.title,
        body=intent.body,
    )
    return pull_request.get("html_url")


def build_skipped_result(config: UpdateFlowConfig) -> UpdateFlowResult:
    return UpdateFlowResult(
        status="skipped",
        message=(
            f"composer.json or composer.lock not found in {config.composer_directory}; "
            "nothing was run, credentials were not checked"
        ),
    )


def build_no_changes_result(working_branch: WorkingBranch, update_result: UpdateResult) -> UpdateFlowResult:
    return UpdateFlowResult(
        status="no_changes",
        message="no changes",
        branch=working_branch.name,
        changed_packages=update_result.summary_lines,
    )


def build_success_result(
    working_branch: WorkingBranch,
    update_result: UpdateResult,
    intent: PullRequestIntent,
    pr_url: str | None,
) -> UpdateFlowResult:
    if intent.suppress:
        message = f"Branch {working_branch.name} updated; open pull request already tracks it"
    else:
        message = "Pull request created"
    return UpdateFlowResult(
        status="success",
        message=message,
        branch=working_branch.name,
        pr_title=intent.title,
        pr_url=pr_url,
        pr_suppressed=intent.suppress,
        changed_packages=update_result.summary_lines,
    )
