from objkit.selector.builder import Selector, append_part, combine, css_selector_builder
from objkit.selector.errors import DuplicatePartError, OrderViolationError, SelectorError
from objkit.selector.model import PART_ORDER, SINGLETON_KINDS, PartKind

__all__ = [
    "Selector",
    "append_part",
    "combine",
    "css_selector_builder",
    "SelectorError",
    "OrderViolationError",
    "DuplicatePartError",
    "PartKind",
    "PART_ORDER",
    "SINGLETON_KINDS",
]
