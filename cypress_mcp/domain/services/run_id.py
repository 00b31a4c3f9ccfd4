import itertools
import time

_sequence = itertools.count(1)


def new_run_id() -> str:
    """Return a run id unique for the lifetime of the process.

    The millisecond timestamp keeps ids readable and roughly ordered; the
    sequence number separates runs started within the same millisecond.
    """
    return f"run_{time.time_ns() // 1_000_000}_{next(_sequence):06d}"
