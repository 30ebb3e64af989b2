"""Structlog-based logging configuration for avilist.

This module provides structured logging configuration using structlog.
Library modules only call ``structlog.get_logger``; applications (and the
bundled CLIs) call ``configure_structlog`` once at start-up.

Output format:
- JSON lines when ``json_logs`` is enabled or ``AVILIST_JSON_LOGS=true``
- Human-readable console output otherwise
"""

import logging
import os
import sys
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from typing import Any

import structlog

from avilist.config.models import AviListConfig


def get_package_version() -> str:
    """Get the installed avilist distribution version for log context."""
    try:
        return distribution_version("avilist")
    except PackageNotFoundError:
        return "unknown"


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _use_json_output(config: AviListConfig) -> bool:
    """Decide between JSON and console rendering."""
    if os.environ.get("AVILIST_JSON_LOGS", "").lower() == "true":
        return True
    return config.logging.json_logs


def _configure_processors(config: AviListConfig) -> list:
    """Configure structlog processors."""
    extra_fields = {
        "service": "avilist",
        "version": get_package_version(),
        **config.logging.extra_fields,  # Allow config to override/add fields
    }

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if _use_json_output(config):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    return processors


def _configure_handlers(config: AviListConfig) -> None:
    """Route stdlib logging to stderr at the configured level."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    # stderr keeps log lines out of CLI table output on stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)


def configure_structlog(config: AviListConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The AviListConfig instance containing logging settings.
    """
    processors = _configure_processors(config)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        version=get_package_version(),
        log_level=config.logging.level,
        json_output=_use_json_output(config),
    )
