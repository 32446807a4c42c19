"""
Logger setup for the application.

Application loggers reuse uvicorn's handler when the app runs under uvicorn,
so their records share its format; otherwise a basic stream handler is used.
"""

import logging

APP_LOGGERS = [
    "CORE_CONFIG",
    "CORE_DATABASE",
    "CORE_DEPENDENCIES",
    "EVENT_PLANNER",
    "EXCEPTION_HANDLERS",
    "EVENTS_API",
    "USERS_API",
    "HEALTH_API",
    "USER_REPOSITORY",
    "EVENT_REPOSITORY",
]


def configure_logging(level: str = "INFO") -> None:
    uvicorn_logger = logging.getLogger("uvicorn")
    if not uvicorn_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )

    for logger_name in APP_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        if uvicorn_logger.handlers and not logger.handlers:
            logger.addHandler(uvicorn_logger.handlers[0])
            logger.propagate = False
