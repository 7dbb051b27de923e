import logging
import os

from dotenv import load_dotenv

from composer_update.application.update_flow import run_update_flow
from composer_update.infrastructure.config.settings import build_update_flow_config_from_env
from composer_update.infrastructure.observability.context import set_run_id
from composer_update.infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
)
from composer_update.infrastructure.workflow_factory import build_update_flow_dependencies


logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    set_run_id(os.getenv("GITHUB_RUN_ID", "-"))
    register_sensitive_values(os.getenv("GITHUB_TOKEN"))

    log_event(logger, logging.INFO, "cli.workflow.start")
    try:
        flow_config = build_update_flow_config_from_env()
        flow_dependencies = build_update_flow_dependencies(flow_config)
        result = run_update_flow(flow_config, flow_dependencies)
    except Exception as error:
        log_event(logger, logging.ERROR, "cli.workflow.failed", error=str(error))
        raise

    log_event(
        logger,
        logging.INFO,
        "cli.workflow.end",
        status=result.status,
        message=result.message,
        branch=result.branch,
        pr_url=result.pr_url,
    )


if __name__ == "__main__":
    main()
