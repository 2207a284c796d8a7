"""structlog setup for the message service.

Development runs render events on the console, production runs emit one
JSON object per event. Under pytest every event is dropped.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("resolved_message_bundle", locale="ru", state="requested")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import Settings

# Above CRITICAL, so nothing reaches a handler
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Check whether the process is a pytest run."""
    return "pytest" in sys.modules


def _configure_silent() -> None:
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_processors(json_output: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        settings: Settings to read LOG_LEVEL and is_production from.
            Defaults to the application settings singleton.
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; True selects
            JSON output.

    Returns:
        A logger using the new configuration.
    """
    if _is_test_environment():
        _configure_silent()
        return structlog.stdlib.get_logger()

    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    json_output = settings.is_production if is_production is None else is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_build_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name() -> Optional[str]:
    # Two frames up: past this helper and past get_module_logger
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None

    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    The bound context holds ``component`` (last segment of the module name)
    and ``module_path`` (full module name), e.g. ``loader`` and
    ``infrastructure.i18n.loader``.
    """
    module_name = _caller_module_name()
    if module_name is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
