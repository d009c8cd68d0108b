from __future__ import annotations

import logging
from typing import Callable, ClassVar, Iterable, Iterator, List, Optional, Self

from toolbox.errors import BoxIndexError, ClosedError
from toolbox.indent import Indent, Line
from toolbox.item import Item
from toolbox.product import Product
from toolbox.strategy import ChildrenPrintStrategy, Indented

logger = logging.getLogger(__name__)


class Box(Item):
    """
    Composite item: an ordered list of products, an indent and a
    ChildrenPrintStrategy.

        box = Box("B1")
        box.add_product(factory.create_tool("Pliers", "Plier-type")) \\
           .add_product(factory.create_tool("10", "Wrench"))
        box[1]                      # the "10" tool
        box.set_strategy(OneLine())
        print(box)                  # B1, containing: { Pliers Plier-type, 10 Wrench }

    Once placed, a box knows its own depth: it renders at the indent it was
    assigned and hands its children one offset more. A box is never shared,
    and closing it closes the products it owns.
    """
    DEFAULT_STRATEGY: ClassVar[Callable[[], ChildrenPrintStrategy]] = Indented

    def __init__(self, name: str, strategy: Optional[ChildrenPrintStrategy] = None) -> None:
        super().__init__(name)
        self._products: List[Product] = []
        self._indent = Indent()
        self._strategy: ChildrenPrintStrategy = (
            self._ensure_strategy(strategy) if strategy is not None
            else type(self).DEFAULT_STRATEGY()
        )

    @staticmethod
    def _ensure_strategy(strategy: object) -> ChildrenPrintStrategy:
        if not isinstance(strategy, ChildrenPrintStrategy):
            raise TypeError(
                f"Expected ChildrenPrintStrategy, got {type(strategy).__name__}"
            )
        return strategy

    def _ensure_open(self) -> None:
        if self.closed:
            raise ClosedError(f"Box {self.name!r} is closed")

    # ---- configuration ----

    @property
    def indent(self) -> Indent:
        return self._indent

    @property
    def strategy(self) -> ChildrenPrintStrategy:
        return self._strategy

    def set_strategy(self, strategy: ChildrenPrintStrategy) -> Self:
        self._ensure_open()
        strategy = self._ensure_strategy(strategy)
        previous, self._strategy = self._strategy, strategy
        if previous is not strategy:
            previous.close()
        logger.debug(f"Box {self.name!r}: strategy {previous!r} -> {strategy!r}")
        return self

    def set_indent(self, indent: Indent) -> None:
        self._indent = indent
        inner = indent.offset()
        for product in self._products:
            product.set_indent(inner)

    # ---- mutation ----

    def add_product(self, product: Product) -> Self:
        self._ensure_open()
        if not isinstance(product, Product):
            raise TypeError(f"Expected Product, got {type(product).__name__}")
        product.set_indent(self._indent.offset())
        self._products.append(product)
        return self

    __iadd__ = add_product

    def extend(self, products: Iterable[Product]) -> Self:
        for p in products:
            self.add_product(p)
        return self

    # ---- sequence protocol ----

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def index(self, i: int) -> Item:
        self._ensure_open()
        if i < 0:
            raise BoxIndexError(self.name, i, len(self._products))
        try:
            return self._products[i].unwrap()
        except IndexError:
            raise BoxIndexError(self.name, i, len(self._products)) from None

    # ---- identity ----

    @property
    def is_box(self) -> bool:
        return True

    def as_box(self) -> Box:
        return self

    # ---- layout ----

    def render(self, indent: Optional[Indent] = None) -> Iterator[Line]:
        """
        Render at the stored indent; the indent argument is ignored.

        The strategy's first line continues the name line.
        """
        self._ensure_open()
        head = Line(self._indent, self.name)
        it = self._strategy.render(self._indent, self._products)
        first = next(it, None)
        if first is None:
            yield head
            return
        yield head.extended(first.value)
        yield from it

    # ---- lifetime ----

    def close(self) -> None:
        if self.closed:
            return
        for product in self._products:
            if not product.is_shared:
                product.close()
        self._products.clear()
        self._strategy.close()
        super().close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
