"""Terminal size query."""

from __future__ import annotations

import os
import sys

from loguru import logger
from pydantic import BaseModel, Field


class TerminalGeometry(BaseModel):
    """Terminal size in character cells."""

    model_config = {"frozen": True}

    columns: int = Field(ge=1)
    rows: int = Field(ge=1)


def query_terminal_size(fd: int | None = None) -> TerminalGeometry | None:
    """Ask the terminal attached to ``fd`` (stdout by default) for its size.

    Args:
        fd: File descriptor to query

    Returns:
        The terminal geometry, or None if the descriptor is not a terminal
        or reports a zero size
    """
    if fd is None:
        try:
            fd = sys.stdout.fileno()
        except (AttributeError, OSError, ValueError):
            logger.debug("Terminal query: stdout has no file descriptor.")
            return None

    try:
        size = os.get_terminal_size(fd)
    except OSError as exc:
        logger.debug("Terminal query failed: {}", exc)
        return None

    if size.columns < 1 or size.lines < 1:
        logger.debug("Terminal query returned an empty size {}x{}.", size.columns, size.lines)
        return None

    return TerminalGeometry(columns=size.columns, rows=size.lines)
