"""objkit - rectangle value object, JSON bridge and CSS selector builder."""

__version__ = "0.1.0"

from objkit.config import DEFAULT_SERIALIZER_CONFIG, SerializerConfig  # noqa: E402
from objkit.json_bridge import deserialize, serialize  # noqa: E402
from objkit.rectangle import Rectangle  # noqa: E402
from objkit.selector import (  # noqa: E402
    DuplicatePartError,
    OrderViolationError,
    PartKind,
    Selector,
    SelectorError,
    combine,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "Rectangle",
    "serialize",
    "deserialize",
    "SerializerConfig",
    "DEFAULT_SERIALIZER_CONFIG",
    "Selector",
    "PartKind",
    "combine",
    "css_selector_builder",
    "SelectorError",
    "OrderViolationError",
    "DuplicatePartError",
]
