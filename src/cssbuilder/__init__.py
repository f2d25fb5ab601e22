"""cssbuilder: validated CSS selector construction plus small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import DuplicateOccurrenceError, InvalidOrderError, SelectorError
from cssbuilder.objects import Rectangle, from_json, to_json
from cssbuilder.selector import (
    CANONICAL_ORDER,
    FragmentKind,
    SelectorBuilder,
    build_selector,
    css_selector_builder,
)

__all__ = [
    "CANONICAL_ORDER",
    "CssBuilderConfig",
    "DuplicateOccurrenceError",
    "FragmentKind",
    "InvalidOrderError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "__version__",
    "build_selector",
    "css_selector_builder",
    "from_json",
    "to_json",
]
