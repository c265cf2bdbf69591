"""Time-derived seeds for re-seeding when no usable state exists."""

import os
import time

from .state import UINT32_MASK


def time_seed() -> int:
    """
    Derive a 32-bit seed from the wall clock and the process id.

    Mixes microseconds, seconds and pid as ``((usec << 16) ^ sec) ^ (pid << 16)``
    so that processes started in the same second still diverge.
    """
    now_ns = time.time_ns()
    sec, usec = divmod(now_ns // 1000, 1_000_000)
    seed = ((usec << 16) ^ sec) & UINT32_MASK
    seed ^= (os.getpid() << 16) & UINT32_MASK
    return seed
