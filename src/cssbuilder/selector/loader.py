"""Build selectors from plain data descriptions (e.g. loaded from JSON).

Description format:
    A compound selector is a list of ``[kind, value]`` steps, applied in order:

        [["element", "a"], ["attr", "href$=\\".png\\""], ["pseudo-class", "focus"]]

    A combination is a mapping with a single ``combine`` key:

        {"combine": [<left>, "+", <right>]}
"""

from __future__ import annotations

import re
from typing import Any

from cssbuilder.selector.builder import SelectorBuilder
from cssbuilder.selector.facade import css_selector_builder

__all__ = ["build_selector"]

# camelCase -> kebab-case boundary
_CAMEL_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")

_STEP_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "attribute": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _normalize_kind(raw: str) -> str:
    return _CAMEL_RE.sub("-", raw.strip()).replace("_", "-").lower()


def _build_compound(steps: list[Any]) -> SelectorBuilder:
    if not steps:
        raise ValueError("Selector description has no steps")
    builder = SelectorBuilder()
    for step in steps:
        if not isinstance(step, (list, tuple)) or len(step) != 2:
            raise ValueError(f"Invalid selector step: {step!r}")
        kind, value = step
        method = _STEP_METHODS.get(_normalize_kind(str(kind)))
        if method is None:
            raise ValueError(f"Unknown fragment kind: {kind!r}")
        getattr(builder, method)(str(value))
    return builder


def _build_combination(args: Any) -> SelectorBuilder:
    if not isinstance(args, (list, tuple)) or len(args) != 3:
        raise ValueError(f"'combine' expects [left, combinator, right], got {args!r}")
    left, combinator, right = args
    if not isinstance(combinator, str):
        raise ValueError(f"Invalid combinator: {combinator!r}")
    return css_selector_builder.combine(
        build_selector(left), combinator, build_selector(right)
    )


def build_selector(description: Any) -> SelectorBuilder:
    """Build a SelectorBuilder from a list of steps or a ``combine`` mapping.

    Builder errors (duplicate or out-of-order fragments) propagate unchanged.
    Malformed descriptions raise ValueError.
    """
    if isinstance(description, dict):
        if set(description) != {"combine"}:
            raise ValueError(
                f"Expected a mapping with a single 'combine' key, got {sorted(description)!r}"
            )
        return _build_combination(description["combine"])
    if isinstance(description, list):
        return _build_compound(description)
    raise ValueError(f"Invalid selector description: {description!r}")
