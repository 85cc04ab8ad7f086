from .delay import delay, delay_reject, delay_resolve, delayM
from .timed import timed_or_reject, timed_or_resolve

__all__ = (
    # Delay
    "delay",
    "delay_reject",
    "delay_resolve",
    "delayM",
    # Timed race
    "timed_or_reject",
    "timed_or_resolve",
)
