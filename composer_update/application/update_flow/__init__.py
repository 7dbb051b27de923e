from composer_update.application.update_flow.contracts import (
    UpdateFlowConfig,
    UpdateFlowDependencies,
    UpdateFlowResult,
)
from composer_update.application.update_flow.use_case import run_update_flow

__all__ = [
    "UpdateFlowConfig",
    "UpdateFlowDependencies",
    "UpdateFlowResult",
    "run_update_flow",
]
