"""CPU time measurement and timestamps."""

import time


def current_time():
    """Return the CPU time consumed by the current thread, in seconds."""
    return float(time.thread_time())


def elapsed_time(start_time):
    """Return the thread CPU time elapsed since start_time."""
    return current_time() - start_time


def date_time():
    """Return the local date and time as 'YYYY-MM-DDTHH:MM:SS'."""
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())