"""structlog setup shared by the CLI and the web service."""

import logging
import re
import sys
from typing import Optional, TextIO

import structlog

# Anything that could authenticate against the store, plus user emails
_SECRETS = (
    (re.compile(r"eyJ[\w-]{10,}\.[\w-]{10,}\.[\w-]+"), "REDACTED_JWT"),
    (re.compile(r"(Bearer\s+)[\w.-]{20,}"), r"\1REDACTED"),
    (re.compile(r"((?:api[_-]?key|apikey|service_role_key)['\"]?\s*[:=]\s*['\"]?)[\w-]{10,}", re.I), r"\1REDACTED"),
    (re.compile(r"[\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,}"), "REDACTED@email"),
)

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _redact_sensitive(_, __, event_dict: dict) -> dict:
    """Scrub tokens, keys and emails from string values."""
    for key, value in event_dict.items():
        if not isinstance(value, str):
            continue
        for pattern, replacement in _SECRETS:
            value = pattern.sub(replacement, value)
        event_dict[key] = value
    return event_dict


def _pre_chain() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_sensitive,
    ]


def setup_logging(
    json_mode: bool = False,
    level: str = "INFO",
    stream: Optional[TextIO] = None,
) -> None:
    """Route structlog through stdlib logging with one stderr handler.

    Args:
        json_mode: JSON lines for the web service, console output for the CLI.
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; unknown names mean INFO.
        stream: Where to write, stderr by default.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_mode
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
