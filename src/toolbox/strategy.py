from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

from toolbox.indent import Indent, Line
from toolbox.product import Product


class ChildrenPrintStrategy(ABC):
    """
    Layout policy a Box uses for its children.

    render() yields the lines that follow the box name. The first yielded
    line is joined onto the name line by the box, the rest are emitted as is.
    Strategies keep no per-box state, so one instance can serve many boxes.
    """

    @abstractmethod
    def render(self, indent: Indent, children: Sequence[Product]) -> Iterator[Line]:
        ...

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class OneLine(ChildrenPrintStrategy):
    """
      name, containing: { c0, c1, c2 }
    """
    SEP = ", "

    @staticmethod
    def flatten(child: Product) -> str:
        return " ".join(line.value for line in child.render())

    def render(self, indent: Indent, children: Sequence[Product]) -> Iterator[Line]:
        inner = self.SEP.join(self.flatten(child) for child in children)
        yield Line(indent, f", containing: {{ {inner} }}")


class Indented(ChildrenPrintStrategy):
    """
      name, containing: {
        c0
        c1
      }

    Children are rendered one offset below the box indent, the closing
    brace sits at the box indent.
    One offset, not two: it matches the indent boxes store in their
    children, so shared and unique tools share a column (DESIGN.md, Open
    question 1).
    """

    def render(self, indent: Indent, children: Sequence[Product]) -> Iterator[Line]:
        yield Line(indent, ", containing: {")
        inner = indent.offset()
        for child in children:
            yield from child.render(inner)
        yield Line(indent, "}")


class NullStrategy(ChildrenPrintStrategy):
    """
    Renders nothing: the box shows up as its bare name.
    """
    _instance: Optional["NullStrategy"] = None

    def __new__(cls) -> "NullStrategy":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def render(self, indent: Indent, children: Sequence[Product]) -> Iterator[Line]:
        return
        yield


nullStrategy = NullStrategy()
