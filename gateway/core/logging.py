"""
Logging configuration for the API gateway.
"""

import logging
import re
import sys

import structlog

_BEARER_PATTERN = re.compile(r"(Bearer\s+)\S+", re.IGNORECASE)
_SENSITIVE_KEYS = ("authorization", "credential", "token")
_REDACTED = "[REDACTED]"


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in _SENSITIVE_KEYS)


def _redact(value):
    if isinstance(value, str):
        return _BEARER_PATTERN.sub(r"\1" + _REDACTED, value)
    if isinstance(value, dict):
        return {
            key: _REDACTED if _is_sensitive(str(key)) and item else _redact(item)
            for key, item in value.items()
        }
    return value


def credential_redaction_processor(logger, method_name, event_dict):
    """
    Structlog processor that keeps bearer credentials out of the logs.

    Masks ``Bearer <token>`` substrings anywhere in string values and
    replaces the value of any key that looks like a credential.
    """
    for key, value in list(event_dict.items()):
        if key != "event" and _is_sensitive(key) and value:
            event_dict[key] = _REDACTED
        else:
            event_dict[key] = _redact(value)
    return event_dict


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Setup structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render JSON lines (default) or the console renderer
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(message)s",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        credential_redaction_processor,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
