"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import FragmentKind


class SelectorError(Exception):
    """Base error for all selector construction failures."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateOccurrenceError(SelectorError):
    """Raised when element, id or pseudo-element is supplied twice."""

    default_message = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, kind: FragmentKind, message: str | None = None) -> None:
        super().__init__(message or self.default_message, kind=kind)


class InvalidOrderError(SelectorError):
    """Raised when a fragment kind is introduced out of canonical order.

    Attributes:
        kind: The fragment kind whose introduction broke the order.
        order: The fragment kinds present, in the order they were introduced.
    """

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(
        self,
        kind: FragmentKind,
        order: list[FragmentKind] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or self.default_message, kind=kind)
        self.order = list(order or [])
