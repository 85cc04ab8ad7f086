"""
lazysettle: composable lazy sequences and task settlement combinators.

Two families of building blocks:
- Restartable, exhaustion-aware sequence factories (skip, repeat, reverse)
- Settlement combinators over LazyCoroResult tasks (settle-all, settle in
  completion order, all-or-nothing, timed race, delays)

Architecture:
- Tasks are kungfu LazyCoroResult values: Ok(value) fulfills, Error(reason) rejects
- Generic combinators (*M functions) work with any task shape via extract + wrap
- Sugar functions (no suffix) for LazyCoroResult
"""

# Core types
from ._types import LCR, Executor, NoError, Reject, Resolve, Source, Task

# Internal helpers (for custom task shapes)
from . import _helpers

# Lift helpers (reduce boilerplate)
from . import lift

# Sequences
from .iterate import (
    ExhaustionAwareCursor,
    LazySequence,
    default,
    exhaustion_aware,
    reiterable,
    reverse,
    skip,
    to_list,
    to_list_async,
)

# Settlement
from .settle import (
    FULFILLED,
    REJECTED,
    Settlement,
    SettlementState,
    SettlementStream,
    after_settled,
    all_settled,
    all_settled_iterable,
    to_resolved,
    to_resolvedM,
)

# Time operations
from .time import (
    delay,
    delay_reject,
    delay_resolve,
    delayM,
    timed_or_reject,
    timed_or_resolve,
)

# Errors
from ._errors import TimeoutError

__all__ = (
    # Types
    "LCR",
    "Executor",
    "NoError",
    "Reject",
    "Resolve",
    "Source",
    "Task",
    # Internal helpers
    "_helpers",
    # Lift module
    "lift",
    # Sequences
    "ExhaustionAwareCursor",
    "LazySequence",
    "default",
    "exhaustion_aware",
    "reiterable",
    "reverse",
    "skip",
    "to_list",
    "to_list_async",
    # Settlement
    "FULFILLED",
    "REJECTED",
    "Settlement",
    "SettlementState",
    "SettlementStream",
    "after_settled",
    "all_settled",
    "all_settled_iterable",
    "to_resolved",
    "to_resolvedM",
    # Time
    "delay",
    "delay_reject",
    "delay_resolve",
    "delayM",
    "timed_or_reject",
    "timed_or_resolve",
    # Errors
    "TimeoutError",
)
