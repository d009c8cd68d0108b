# toolbox/__init__.py

from .errors import (
    ToolboxError,
    BoxIndexError,
    NotABoxError,
    ClosedError,
)

from .indent import (
    Indent,
    Line,
)

from .item import (
    Item,
    Sharing,
    Tool,
    UniqueTool,
    SharedTool,
)

from .product import (
    Product,
    PlainProduct,
    BrandedProduct,
    unwrap,
)

from .strategy import (
    ChildrenPrintStrategy,
    OneLine,
    Indented,
    NullStrategy,
    nullStrategy,
)

from .box import Box
from .factory import ToolFactory

__all__ = [
    # errors
    "ToolboxError",
    "BoxIndexError",
    "NotABoxError",
    "ClosedError",

    # layout values
    "Indent",
    "Line",

    # items
    "Item",
    "Sharing",
    "Tool",
    "UniqueTool",
    "SharedTool",
    "Box",

    # decorators
    "Product",
    "PlainProduct",
    "BrandedProduct",
    "unwrap",

    # strategies
    "ChildrenPrintStrategy",
    "OneLine",
    "Indented",
    "NullStrategy",
    "nullStrategy",

    # registry
    "ToolFactory",
]
