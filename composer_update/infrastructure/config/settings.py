import os
from pathlib import Path
from typing import Mapping

from composer_update.application.update_flow import UpdateFlowConfig
from composer_update.domain.branching import DEFAULT_SINGLE_BRANCH_POSTFIX
from composer_update.domain.errors import ConfigurationError


_FALSE_VALUES = {"", "0", "false", "no", "off", "(false)", "null"}


def _required_env(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value


def env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() not in _FALSE_VALUES


def parse_packages(value: str | None) -> tuple[str, ...]:
    return tuple((value or "").split())


def build_update_flow_config_from_env(environ: Mapping[str, str] | None = None) -> UpdateFlowConfig:
    if environ is None:
        environ = os.environ

    repository = _required_env(environ, "GITHUB_REPOSITORY")
    if "/" not in repository:
        raise ConfigurationError(f"GITHUB_REPOSITORY must look like owner/name, got: {repository}")

    workspace = environ.get("GITHUB_WORKSPACE") or os.getcwd()
    return UpdateFlowConfig(
        repository=repository,
        workspace_directory=Path(workspace),
        token=_required_env(environ, "GITHUB_TOKEN"),
        composer_path=environ.get("COMPOSER_PATH", ""),
        packages=parse_packages(environ.get("COMPOSER_PACKAGES")),
        single_branch=env_flag(environ, "APP_SINGLE_BRANCH"),
        # An explicitly empty postfix is honoured; only an unset one falls back.
        single_branch_postfix=environ.get("APP_SINGLE_BRANCH_POSTFIX", DEFAULT_SINGLE_BRANCH_POSTFIX),
        commit_prefix=environ.get("GIT_COMMIT_PREFIX", ""),
        git_author_name=environ.get("GIT_NAME", "cu"),
        git_author_email=environ.get("GIT_EMAIL", "cu@composer-update"),
        source_ref=environ.get("GITHUB_REF") or None,
    )
