"""SelectorBuilder: incremental, validated construction of CSS selectors.

A compound selector is written as::

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class fragments may repeat; element, id and
pseudo-element may occur once. Compound selectors are joined with a
combinator (' ', '+', '~', '>') through :meth:`SelectorBuilder.combine`.
"""

from __future__ import annotations

import logging
from typing import Union

from cssbuilder.errors import DuplicateOccurrenceError, InvalidOrderError
from cssbuilder.selector.model import CANONICAL_ORDER, FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)

Segment = Union[str, list[str]]


class SelectorBuilder:
    """Mutable selector under construction.

    Every mutating method returns ``self`` so calls can be chained. A failed
    call leaves the builder in an unusable state; start a new chain instead.
    """

    def __init__(self) -> None:
        self.fragments: dict[FragmentKind, Segment] = {}
        self.combined_segments: list[Segment] = []

    # --- singleton fragments ------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._set(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._set(FragmentKind.ID, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._set(FragmentKind.PSEUDO_ELEMENT, value)

    # --- repeatable fragments -----------------------------------------------

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    # --- combination --------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with a combinator.

        Only the right operand's own combination is carried over, so the
        left operand must be a plain compound selector.
        """
        self.combined_segments.extend(left.fragments.values())
        self.combined_segments.append(f" {combinator} ")
        self.combined_segments.extend(right.fragments.values())
        self.combined_segments.extend(right.combined_segments)
        logger.debug(
            "Combined selectors with %r (%d segments)",
            combinator,
            len(self.combined_segments),
        )
        return self

    # --- rendering ----------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector as CSS text."""
        segments = self.combined_segments or list(self.fragments.values())
        return "".join(_flatten(segments))

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ----------------------------------------------------------

    def _set(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        if kind in self.fragments:
            logger.debug("Duplicate %s fragment: %r", kind.value, value)
            raise DuplicateOccurrenceError(kind)
        self.fragments[kind] = kind.render(value)
        self._check_order(kind)
        return self

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        items = self.fragments.setdefault(kind, [])
        items.append(kind.render(value))  # type: ignore[union-attr]
        self._check_order(kind)
        return self

    def _check_order(self, kind: FragmentKind) -> None:
        """Raise if the kinds present were not introduced in canonical order."""
        actual = list(self.fragments)
        present = [k for k in CANONICAL_ORDER if k in self.fragments]
        if any(i > present.index(k) for i, k in enumerate(actual)):
            logger.debug(
                "Out of order %s fragment: %s",
                kind.value,
                ", ".join(k.value for k in actual),
            )
            raise InvalidOrderError(kind, actual)


def _flatten(segments: list[Segment]) -> list[str]:
    flat: list[str] = []
    for segment in segments:
        if isinstance(segment, list):
            flat.extend(segment)
        else:
            flat.append(segment)
    return flat
