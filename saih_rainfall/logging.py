import logging
import sys
from typing import Any, Callable, Dict

import structlog

from .config import AppSettings

Processor = Callable[[Any, str, Dict[str, Any]], Dict[str, Any]]


def service_info(settings: AppSettings) -> Processor:
    """Processor stamping every event with the service identity."""
    fields = {
        "service": settings.app_name,
        "env": settings.app_env,
        "version": settings.app_version,
    }

    def add_service_info(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_service_info


def init_logging(settings: AppSettings) -> structlog.BoundLogger:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[
            # request_id is bound per request by RequestIDMiddleware
            structlog.contextvars.merge_contextvars,
            service_info(settings),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if level == logging.DEBUG else structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()
