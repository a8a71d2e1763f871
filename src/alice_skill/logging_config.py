"""Process logging and the default skill error sink."""

import logging
import sys
from typing import Optional

from alice_skill.errors import SerializationError, UnexpectedFault

logger = logging.getLogger("alice_skill")


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logger with a plaintext stdout handler."""
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def log_skill_error(error: Exception) -> None:
    """Default Skill logger. Faults carry the traceback of what caused them."""
    if isinstance(error, (UnexpectedFault, SerializationError)):
        cause = error.__cause__ or error
        logger.error("%s", error, exc_info=(type(cause), cause, cause.__traceback__))
    else:
        logger.warning("%s", error)
