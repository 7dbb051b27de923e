import logging
import re
from typing import Any, Iterable

from composer_update.infrastructure.observability.context import get_run_id


_TOKEN_PATTERNS = (
    re.compile(r"(https://)[^@\s/]+(@github\.com)", re.IGNORECASE),
    re.compile(r"(x-access-token:)[^@\s]+", re.IGNORECASE),
    re.compile(r"(Bearer\s+)[A-Za-z0-9_\-.]+", re.IGNORECASE),
    re.compile(r"\bgh[pousr]_[A-Za-z0-9_]+\b"),
    re.compile(r"\bgithub_pat_[A-Za-z0-9_]+\b"),
)
# Shorter values would mangle unrelated words in every log line.
MIN_SENSITIVE_VALUE_LENGTH = 8
_REGISTERED_SENSITIVE_VALUES: set[str] = set()


def register_sensitive_values(*values: str | None) -> None:
    for value in values:
        if value and len(value) >= MIN_SENSITIVE_VALUE_LENGTH:
            _REGISTERED_SENSITIVE_VALUES.add(value)


def _sensitive_values() -> Iterable[str]:
    return _REGISTERED_SENSITIVE_VALUES


def redact_secrets(text: str) -> str:
    redacted = text
    for value in _sensitive_values():
        redacted = redacted.replace(value, "[REDACTED]")
    for pattern in _TOKEN_PATTERNS:
        if pattern.groups == 2:
            redacted = pattern.sub(r"\1[REDACTED]\2", redacted)
        elif pattern.groups == 1:
            redacted = pattern.sub(r"\1[REDACTED]", redacted)
        else:
            redacted = pattern.sub("[REDACTED]", redacted)
    return redacted


class RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id()
        return True


def configure_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [run_id=%(run_id)s] %(name)s - %(message)s",
        )
    else:
        root_logger.setLevel(level)

    current_factory = logging.getLogRecordFactory()
    if not getattr(current_factory, "_run_id_factory", False):
        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = current_factory(*args, **kwargs)
            record.run_id = get_run_id()
            return record

        setattr(record_factory, "_run_id_factory", True)
        logging.setLogRecordFactory(record_factory)

    for handler in root_logger.handlers:
        has_run_id_filter = any(isinstance(f, RunIdFilter) for f in handler.filters)
        if not has_run_id_filter:
            handler.addFilter(RunIdFilter())


def safe_message(message: str) -> str:
    return redact_secrets(message)


def _format_field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return safe_message(value)
    return safe_message(repr(value))


def structured_message(event: str, **fields: Any) -> str:
    parts = [f"event={safe_message(event)}"]
    for key, value in fields.items():
        if value is None:
            continue
        formatted_value = _format_field_value(value).replace('"', '\\"')
        parts.append(f'{key}="{formatted_value}"')
    return " ".join(parts)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    logger.log(level, structured_message(event, **fields))
