from __future__ import annotations

import logging
from typing import ClassVar, Dict, Optional, Self, TypeVar

from toolbox.errors import ClosedError
from toolbox.item import SharedTool, Tool, UniqueTool
from toolbox.product import BrandedProduct, PlainProduct, Product

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Tool)


class ToolFactory:
    """
    Creates tools wrapped as products and owns every shared one.

    Names of at most SHARED_NAME_LIMIT characters denote shared tools: the
    first create_tool() call for such a name builds the product, later calls
    return that same instance. Longer names always get a fresh UniqueTool.

        with ToolFactory() as factory:
            a = factory.create_tool("10", "Wrench")
            b = factory.create_tool("10", "Wrench")
            assert a is b

    Closing the factory closes the shared tools. Boxes never do.
    """
    SHARED_NAME_LIMIT: ClassVar[int] = 2

    def __init__(self) -> None:
        self._shared: Dict[str, Product[SharedTool]] = {}
        self._closed = False

    @classmethod
    def is_shared_name(cls, name: str) -> bool:
        return len(name) <= cls.SHARED_NAME_LIMIT

    @staticmethod
    def _wrap(tool: T, brand: str) -> Product[T]:
        if brand:
            return BrandedProduct(tool, brand)
        return PlainProduct(tool)

    def create_tool(self, name: str, type: str, brand: str = "") -> Product[Tool]:
        if self._closed:
            raise ClosedError("ToolFactory is closed")

        if not self.is_shared_name(name):
            logger.debug(f"Created unique tool {name!r} ({type})")
            return self._wrap(UniqueTool(name, type), brand)

        product = self._shared.get(name)
        if product is None:
            product = self._wrap(SharedTool(name, type), brand)
            self._shared[name] = product
            logger.debug(f"Interned shared tool {name!r} ({type})")
            return product

        # First registration wins; a differing type or brand is not applied.
        known_brand = product.brand if isinstance(product, BrandedProduct) else ""
        if product.item.type != type or known_brand != brand:
            logger.warning(
                f"Shared tool {name!r} already exists as "
                f"({product.item.type!r}, brand={known_brand!r}); "
                f"ignoring ({type!r}, brand={brand!r})"
            )
        else:
            logger.debug(f"Reused shared tool {name!r}")
        return product

    # ---- registry view ----

    def get(self, name: str) -> Optional[Product[SharedTool]]:
        return self._shared.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._shared

    def __len__(self) -> int:
        return len(self._shared)

    @property
    def shared_names(self) -> tuple[str, ...]:
        return tuple(self._shared)

    # ---- lifetime ----

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        for product in self._shared.values():
            product.item.close()
        logger.debug(f"ToolFactory closed {len(self._shared)} shared tool(s)")
        self._shared.clear()
        self._closed = True

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
