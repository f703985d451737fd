"""
Infrastructure Layer: Logging Setup
The library only emits events; applications call configure_logging once.
"""
import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """JSON lines with ISO timestamps, filtered at `level`"""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=False,
    )
