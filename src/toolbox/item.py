from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterator, Optional, TextIO

from toolbox.errors import NotABoxError
from toolbox.indent import Indent, Line

if TYPE_CHECKING:
    from toolbox.box import Box

logger = logging.getLogger(__name__)


# ========= Core item =========

class Item(ABC):
    """
    A named node of the hierarchy: a leaf Tool or a composite Box.

    Items render as a stream of Line values, can be indexed (item[i] is
    item.index(i)) and report whether they are shared. Shared items belong
    to the ToolFactory that interned them, never to a container.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    # ---- core API ----

    @abstractmethod
    def render(self, indent: Optional[Indent] = None) -> Iterator[Line]:
        ...

    @abstractmethod
    def index(self, i: int) -> Item:
        ...

    @abstractmethod
    def set_indent(self, indent: Indent) -> None:
        ...

    def __getitem__(self, i: int) -> Item:
        return self.index(i)

    # ---- identity ----

    @property
    def is_shared(self) -> bool:
        return False

    @property
    def is_unique(self) -> bool:
        return not self.is_shared

    @property
    def is_box(self) -> bool:
        return False

    def as_box(self) -> Box:
        raise NotABoxError(f"{type(self).__name__} {self.name!r} is not a Box")

    # ---- lifetime ----

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Closed {type(self).__name__} {self.name!r}")

    # ---- output ----

    def __str__(self) -> str:
        return "\n".join(str(line) for line in self.render())

    def print(self, file: Optional[TextIO] = None) -> None:
        print(self, file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


# ========= Tools =========

class Sharing(Enum):
    UNIQUE = "unique"
    SHARED = "shared"


class Tool(Item):
    """
    Leaf item rendered as "<name> <type>".

    A tool behaves as a one-element collection holding itself: any index
    returns the tool, so chained lookups like tool[1][1][1] stop at the leaf.
    Concrete tools differ only in SHARING.
    """
    SHARING: ClassVar[Sharing]

    def __init__(self, name: str, type: str) -> None:
        super().__init__(name)
        self._type = type

    @property
    def type(self) -> str:
        return self._type

    @property
    def sharing(self) -> Sharing:
        return self.SHARING

    @property
    def is_shared(self) -> bool:
        return self.SHARING is Sharing.SHARED

    def index(self, i: int) -> Item:
        return self

    def __iter__(self) -> Iterator[Item]:
        yield self

    def __len__(self) -> int:
        return 1

    @abstractmethod
    def render_indent(self, indent: Optional[Indent]) -> Indent:
        ...

    def render(self, indent: Optional[Indent] = None) -> Iterator[Line]:
        yield Line(self.render_indent(indent), f"{self.name} {self.type}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.type!r})"


class UniqueTool(Tool):
    """
    Tool owned by exactly one container.

    It remembers the indent its container assigned and always renders there,
    whatever indent the caller passes.
    """
    SHARING = Sharing.UNIQUE

    def __init__(self, name: str, type: str) -> None:
        super().__init__(name, type)
        self._indent = Indent()

    @property
    def indent(self) -> Indent:
        return self._indent

    def set_indent(self, indent: Indent) -> None:
        self._indent = indent

    def render_indent(self, indent: Optional[Indent]) -> Indent:
        return self._indent


class SharedTool(Tool):
    """
    Tool interned by a ToolFactory and referenced from any number of boxes.

    It has no depth of its own: set_indent is ignored and rendering uses the
    indent supplied by the caller.
    """
    SHARING = Sharing.SHARED

    def set_indent(self, indent: Indent) -> None:
        pass

    def render_indent(self, indent: Optional[Indent]) -> Indent:
        return indent if indent is not None else Indent()
