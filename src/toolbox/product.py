from __future__ import annotations

import sys
from typing import Generic, Iterator, Optional, TextIO, TypeVar, Union

from toolbox.indent import Indent, Line
from toolbox.item import Item

TItem = TypeVar("TItem", bound=Item)


class Product(Generic[TItem]):
    """
    Decorator around exactly one Item.

    A product forwards the item's structural contract (render, index,
    set_indent, is_shared) and owns the item unless the item is shared,
    in which case the ToolFactory that created it stays the owner.
    """

    def __init__(self, item: TItem) -> None:
        if not isinstance(item, Item):
            raise TypeError(f"Expected Item, got {type(item).__name__}")
        self._item: TItem = item

    @property
    def item(self) -> TItem:
        return self._item

    def unwrap(self) -> TItem:
        """Return the wrapped item. Ownership is not transferred."""
        return self._item

    # ---- forwarded contract ----

    def render(self, indent: Optional[Indent] = None) -> Iterator[Line]:
        yield from self._item.render(indent)

    def index(self, i: int) -> Item:
        return self._item.index(i)

    def __getitem__(self, i: int) -> Item:
        return self.index(i)

    def __iter__(self) -> Iterator:
        return iter(self._item)

    def set_indent(self, indent: Indent) -> None:
        self._item.set_indent(indent)

    @property
    def is_shared(self) -> bool:
        return self._item.is_shared

    # ---- lifetime ----

    def close(self) -> None:
        if not self.is_shared:
            self._item.close()

    # ---- output ----

    def __str__(self) -> str:
        return "\n".join(str(line) for line in self.render())

    def print(self, file: Optional[TextIO] = None) -> None:
        print(self, file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item!r})"


class PlainProduct(Product[TItem]):
    pass


class BrandedProduct(Product[TItem]):
    """
    Product rendered with a brand label:

      BrandedProduct(UniqueTool("Drill", "Impact"), "Bosch")
        -> "Drill Impact [Bosch]"

    The label is appended to the last rendered line, so a multi-line box
    gets it after its closing brace.
    """

    def __init__(self, item: TItem, brand: str) -> None:
        super().__init__(item)
        self._brand = brand

    @property
    def brand(self) -> str:
        return self._brand

    def render(self, indent: Optional[Indent] = None) -> Iterator[Line]:
        it = super().render(indent)
        prev = next(it, None)
        if prev is None:
            return

        for line in it:
            yield prev
            prev = line

        yield prev.extended(f" [{self._brand}]")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item!r}, {self._brand!r})"


def unwrap(node: Union[Item, Product]) -> Item:
    """Return the Item behind node, which may be a Product or an Item."""
    while isinstance(node, Product):
        node = node.unwrap()
    return node
