"""Selector fragment kinds and their canonical ordering."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """One typed piece of a compound CSS selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def repeatable(self) -> bool:
        """True for kinds that may occur several times in one selector."""
        return self in _REPEATABLE

    def render(self, value: str) -> str:
        """Format a raw value as the literal selector text for this kind."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


CANONICAL_ORDER: tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

_REPEATABLE = frozenset(
    {FragmentKind.CLASS, FragmentKind.ATTRIBUTE, FragmentKind.PSEUDO_CLASS}
)

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
