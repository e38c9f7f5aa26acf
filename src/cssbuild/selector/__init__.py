from cssbuild.selector.builder import SelectorBuilder
from cssbuild.selector.combinator import Combination, Combinator, Renderable, combine
from cssbuild.selector.facade import SelectorFacade, css_selector_builder
from cssbuild.selector.model import GRAMMAR_ORDER, FragmentKind, SelectorState

__all__ = [
    "SelectorBuilder",
    "Combination",
    "Combinator",
    "Renderable",
    "combine",
    "SelectorFacade",
    "css_selector_builder",
    "GRAMMAR_ORDER",
    "FragmentKind",
    "SelectorState",
]
