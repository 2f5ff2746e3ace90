"""
Console logging setup for pathfinding_lab applications.

The library itself only emits through ``loguru.logger``; scripts call
``setup_logger`` once to decide where those messages go.
"""

import sys

from loguru import logger


def setup_logger(level: str = "INFO", enable_colors: bool = True) -> int:
    """
    Replace loguru's default handler with a formatted console handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_colors: Whether to color output when stderr is a terminal

    Returns:
        The loguru handler id, usable with ``logger.remove``.
    """
    # Remove any existing handlers to avoid duplicates
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    if colorize:
        console_format = (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<blue>{function}</blue> | "
            "<level>{message}</level>"
        )
    else:
        console_format = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function} | {message}"

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=console_format,
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )
    logger.debug(f"Log level: {level}, Colors: {colorize}")
    return handler_id
