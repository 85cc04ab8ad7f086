from .cursor import ExhaustionAwareCursor, LazySequence, exhaustion_aware
from .drain import to_list, to_list_async
from .factory import default, reiterable, reverse, skip

__all__ = (
    # Cursor
    "ExhaustionAwareCursor",
    "LazySequence",
    "exhaustion_aware",
    # Factories
    "default",
    "reiterable",
    "reverse",
    "skip",
    # Drain
    "to_list",
    "to_list_async",
)
