from composer_update.infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
    safe_message,
)
from composer_update.infrastructure.observability.workflow_observer import (
    observe_update_result,
    observe_workflow_step,
)

__all__ = [
    "configure_logging",
    "log_event",
    "observe_update_result",
    "observe_workflow_step",
    "register_sensitive_values",
    "safe_message",
]
