from composer_update.application.update_flow.contracts import (
    UpdateFlowConfig,
    UpdateFlowDependencies,
    UpdateFlowResult,
)
from composer_update.application.update_flow.steps import (
    build_no_changes_result,
    build_pull_request_intent,
    build_skipped_result,
    build_success_result,
    commit_and_push,
    configure_dependency_token,
    manifest_present,
    open_pull_request,
    prepare_session,
    reconcile_working_branch,
    run_dependency_update,
)


def run_update_flow(
    config: UpdateFlowConfig,
    dependencies: UpdateFlowDependencies,
    *,
    raise_on_error: bool = True,
) -> UpdateFlowResult:
    today = dependencies.today()
    step = "check_manifest"
    try:
        dependencies.observe_step(step, "start")
        if not manifest_present(config, dependencies):
            result = build_skipped_result(config)
            dependencies.observe_step(step, "skipped", detail=result.message)
            return result
        dependencies.observe_step(step, "success")

        step = "prepare_session"
        dependencies.observe_step(step, "start")
        prepare_session(config, dependencies)
        dependencies.observe_step(step, "success")

        step = "reconcile_branch"
        dependencies.observe_step(step, "start")
        working_branch = reconcile_working_branch(config, dependencies)
        dependencies.observe_step(
            step,
            "success",
            detail=f"branch={working_branch.name} mode={working_branch.mode}",
        )

        step = "configure_token"
        dependencies.observe_step(step, "start")
        configure_dependency_token(config, dependencies)
        dependencies.observe_step(step, "success")

        step = "update_dependencies"
        dependencies.observe_step(step, "start")
        update_result = run_dependency_update(config, dependencies)
        dependencies.observe_step(
            step,
            "success",
            detail=f"changed_packages={len(update_result.summary_lines)}",
        )

        step = "detect_changes"
        dependencies.observe_step(step, "start")
        if not dependencies.git.has_changes():
            result = build_no_changes_result(working_branch, update_result)
            dependencies.observe_step(step, "skipped", detail=result.message)
            return result
        dependencies.observe_step(step, "success")

        step = "commit_push"
        dependencies.observe_step(step, "start")
        commit_and_push(config, dependencies, working_branch, update_result, today)
        dependencies.observe_step(step, "success", detail=working_branch.name)

        step = "pull_request"
        dependencies.observe_step(step, "start")
        intent = build_pull_request_intent(config, dependencies, working_branch, update_result, today)
        pr_url = open_pull_request(dependencies, intent)
        result = build_success_result(working_branch, update_result, intent, pr_url)
        dependencies.observe_step(step, "skipped" if intent.suppress else "success", detail=result.message)
        return result
    except Exception as error:
        dependencies.observe_step(step, "error", detail=str(error))
        if raise_on_error:
            raise
        return UpdateFlowResult(
            status="error",
            message="Composer update flow failed",
            error=str(error),
        )
