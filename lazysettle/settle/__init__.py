from .after import after_settled
from .classify import to_resolved, to_resolvedM
from .joint import all_settled
from .ordered import SettlementStream, all_settled_iterable
from .state import FULFILLED, REJECTED, Settlement, SettlementState

__all__ = (
    # States
    "FULFILLED",
    "REJECTED",
    "Settlement",
    "SettlementState",
    # Classifier
    "to_resolved",
    "to_resolvedM",
    # Joint
    "all_settled",
    # Ordered
    "SettlementStream",
    "all_settled_iterable",
    # Aggregate
    "after_settled",
)
