"""cssbuild: CSS selector builder, shape records and JSON helpers."""

__version__ = "0.1.0"

from cssbuild.config import CssbuildConfig, configure_logging  # noqa: E402
from cssbuild.errors import (  # noqa: E402
    CssbuildError,
    DeserializationError,
    DuplicateError,
    OrderError,
    SelectorError,
)
from cssbuild.selector import (  # noqa: E402
    Combination,
    Combinator,
    FragmentKind,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from cssbuild.serialization import deserialize, serialize  # noqa: E402
from cssbuild.shapes import Circle, Rectangle, make_rectangle  # noqa: E402

__all__ = [
    "__version__",
    # config
    "CssbuildConfig",
    "configure_logging",
    # errors
    "CssbuildError",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "DeserializationError",
    # selector
    "SelectorBuilder",
    "FragmentKind",
    "Combination",
    "Combinator",
    "combine",
    "css_selector_builder",
    # serialization
    "serialize",
    "deserialize",
    # shapes
    "Rectangle",
    "Circle",
    "make_rectangle",
]
