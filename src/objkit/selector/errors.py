"""Selector builder error types."""

from __future__ import annotations

from objkit.selector.model import PART_ORDER, PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    + ", ".join(kind.label for kind in PART_ORDER)
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(ValueError):
    """Base error raised when a selector part cannot be appended."""

    def __init__(self, message: str, kind: PartKind, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(message)


class OrderViolationError(SelectorError):
    """Raised when a part's rank is lower than the last appended part's rank."""

    def __init__(self, kind: PartKind, value: str, previous_rank: int) -> None:
        self.previous_rank = previous_rank
        super().__init__(ORDER_MESSAGE, kind, value)


class DuplicatePartError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind, value: str) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind, value)
