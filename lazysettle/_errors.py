from __future__ import annotations

class TimeoutError(Exception):
    """Executor did not settle before its timer fired."""

    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Executor did not settle within {seconds}s")

__all__ = ("TimeoutError",)
