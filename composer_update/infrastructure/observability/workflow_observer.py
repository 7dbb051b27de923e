import logging

from composer_update.domain.models import UpdateResult
from composer_update.infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)


def observe_update_result(update_result: UpdateResult) -> None:
    log_event(
        logger,
        logging.INFO,
        "workflow.update.summary",
        changed_packages=len(update_result.summary_lines),
    )
    # Echo the summary as-is; it is the same text used for the commit and PR body.
    logger.info(safe_message(update_result.summary))


def observe_workflow_step(step: str, status: str, detail: str | None = None) -> None:
    level = logging.ERROR if status == "error" else logging.INFO
    log_event(
        logger,
        level,
        "workflow.step",
        step=step,
        status=status,
        detail=detail,
    )
