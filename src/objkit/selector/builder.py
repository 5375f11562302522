"""Immutable CSS selector builder.

Each call returns a new :class:`Selector`; the receiver is never modified, so
any intermediate selector can serve as the base of several continuations::

    base = css_selector_builder.element("a")
    base.attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'
    base.class_("nav").stringify()
    # 'a.nav'
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from objkit.selector.errors import DuplicatePartError, OrderViolationError
from objkit.selector.model import PartKind

__all__ = ["Selector", "append_part", "combine", "css_selector_builder"]

logger = logging.getLogger(__name__)

_COUNTER_FIELDS: dict[PartKind, str] = {
    PartKind.ELEMENT: "element_count",
    PartKind.ID: "id_count",
    PartKind.PSEUDO_ELEMENT: "pseudo_element_count",
}


@dataclass(frozen=True)
class Selector:
    """Accumulated selector text plus the state needed to validate the next part.

    Attributes:
        text: The selector rendered so far.
        order: Rank of the last appended part, 0 if nothing was appended.
        element_count: Number of element parts (at most 1).
        id_count: Number of id parts (at most 1).
        pseudo_element_count: Number of pseudo-element parts (at most 1).
    """

    text: str = ""
    order: int = 0
    element_count: int = 0
    id_count: int = 0
    pseudo_element_count: int = 0

    # --- part appenders -------------------------------------------------------

    def element(self, value: str) -> Selector:
        return append_part(self, PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return append_part(self, PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return append_part(self, PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return append_part(self, PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return append_part(self, PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return append_part(self, PartKind.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text

    @staticmethod
    def combine(left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with a combinator; see :func:`combine`."""
        return combine(left, combinator, right)


def append_part(selector: Selector, kind: PartKind, value: str) -> Selector:
    """Return a new selector with *value* appended as a part of *kind*.

    Raises :class:`DuplicatePartError` if *kind* is a singleton already present
    in *selector*, and :class:`OrderViolationError` if *kind* ranks below the
    last appended part.
    """
    changes: dict[str, int] = {}
    counter = _COUNTER_FIELDS.get(kind)
    if counter is not None:
        count = getattr(selector, counter) + 1
        if count > 1:
            logger.debug("Rejected duplicate %s part %r", kind.label, value)
            raise DuplicatePartError(kind, value)
        changes[counter] = count

    if selector.order > kind.rank:
        logger.debug(
            "Rejected %s part %r after rank %d", kind.label, value, selector.order
        )
        raise OrderViolationError(kind, value, selector.order)

    return dataclasses.replace(
        selector,
        text=selector.text + kind.render(value),
        order=kind.rank,
        **changes,
    )


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join *left* and *right* with *combinator* into a new selector.

    The result carries no order or singleton state. The combinator is not
    validated, so any of ``' '``, ``'+'``, ``'~'``, ``'>'`` or other text works.
    """
    return Selector(text=f"{left.stringify()} {combinator} {right.stringify()}")


css_selector_builder = Selector()
