"""
Structured logging configuration using structlog.

Every event carries ``service="paylink"``; payment identifiers bound by the
request middleware (deposit address, fee mode) are masked before rendering.
JSON lines in production, colored console output when running at DEBUG.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog

from .config import settings

SERVICE_NAME = "paylink"

# Context keys holding wallet or deposit addresses
ADDRESS_KEYS = ("deposit_address", "wallet", "recipient")


def mask_address(value: str) -> str:
    if len(value) <= 12:
        return value
    return f"{value[:6]}...{value[-4:]}"


def add_service_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Tag events with the service name and shorten bound addresses."""
    event_dict.setdefault("service", SERVICE_NAME)
    for key in ADDRESS_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = mask_address(value)
    return event_dict


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Override log level (default: from settings.log_level)
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if level == logging.DEBUG:
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Fee math and the provider client log through stdlib; render them the same way
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("paylink").setLevel(level)
    # Status polling hits the upstream every few seconds per open payment page
    for name in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(name).setLevel(logging.WARNING)
