"""Selector part model: the six part kinds, their ranks and rendering."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """A compound selector part kind.

    Values are ``(rank, prefix, suffix)``. Rank encodes the required
    left-to-right position within a compound selector:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = (1, "", "")
    ID = (2, "#", "")
    CLASS = (3, ".", "")
    ATTRIBUTE = (4, "[", "]")
    PSEUDO_CLASS = (5, ":", "")
    PSEUDO_ELEMENT = (6, "::", "")

    @property
    def rank(self) -> int:
        return self.value[0]

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    @property
    def is_singleton(self) -> bool:
        """True for kinds allowed at most once per selector."""
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        _, prefix, suffix = self.value
        return f"{prefix}{value}{suffix}"


SINGLETON_KINDS: frozenset[PartKind] = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}
)

# Canonical order, used in error messages.
PART_ORDER: tuple[PartKind, ...] = tuple(sorted(PartKind, key=lambda k: k.rank))
