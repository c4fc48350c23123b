"""Worker pool sizing for resolving repositories in parallel."""

import os
import sys
from typing import Optional


def is_free_threading_enabled() -> bool:
    """Detect if Python is running with the GIL disabled (3.13+ free-threading)."""
    is_gil_enabled = getattr(sys, "_is_gil_enabled", None)
    if is_gil_enabled is None:
        return False
    return not is_gil_enabled()


def get_optimal_worker_count(user_specified: Optional[int] = None) -> int:
    """Number of threads used to resolve repository statuses.

    Resolution mostly waits on git subprocesses, so the pool is larger than
    the CPU count.

    Args:
        user_specified: Worker count requested on the command line, if any

    Returns:
        Number of workers, at least 1
    """
    if user_specified is not None and user_specified > 0:
        return user_specified

    cpu_count = os.cpu_count() or 1
    if is_free_threading_enabled():
        return min(64, cpu_count * 2)
    return min(32, cpu_count + 4)
