from selectorkit.selector import facade
from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.errors import (
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorError,
)
from selectorkit.selector.model import Combinator, FragmentKind

__all__ = [
    "facade",
    "SelectorBuilder",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "Combinator",
    "FragmentKind",
]
