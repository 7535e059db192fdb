"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of the ProgramState connected to the current
context, so lib modules can log without having the state passed in.

Verbosity maps onto loguru levels:
    1 (default) -> INFO     build summary
    2 (-v)      -> DEBUG    environment, skip list, skipped entries
    3 (-vv)     -> TRACE    every file and directory visited

Usage:
    from lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Building output tree...", level=1)
    LOG(f"Processed {path}", level=3)
"""

from loguru import logger
from typing import Any, Dict, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

LEVEL_NAMES: Dict[int, str] = {1: "INFO", 2: "DEBUG", 3: "TRACE"}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <18}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="TRACE")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1) -> None:
    """
    Log message if current state's verbosity allows.

    Messages are emitted at the loguru level matching their verbosity
    (see LEVEL_NAMES); levels above 3 log as TRACE. Nothing is logged
    when no state is connected.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
    """
    state = _program_state.get()

    if state is None or getattr(state, 'verbosity', 0) < level:
        return

    logger.opt(depth=1).log(LEVEL_NAMES.get(level, "TRACE"), message)
