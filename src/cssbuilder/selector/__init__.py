from cssbuilder.selector.builder import SelectorBuilder
from cssbuilder.selector.facade import CssSelectorFacade, css_selector_builder
from cssbuilder.selector.loader import build_selector
from cssbuilder.selector.model import CANONICAL_ORDER, FragmentKind

__all__ = [
    "CANONICAL_ORDER",
    "CssSelectorFacade",
    "FragmentKind",
    "SelectorBuilder",
    "build_selector",
    "css_selector_builder",
]
