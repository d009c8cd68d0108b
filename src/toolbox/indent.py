from dataclasses import dataclass
from typing import ClassVar, NamedTuple


@dataclass(frozen=True)
class Indent:
    """
    Nesting depth used for layout, counted in indent characters.

      Indent()                   -> depth 0, prefix ""
      Indent().offset()          -> depth 2, prefix "  "
      Indent().offset().offset() -> depth 4, prefix "    "

    Values are immutable: offset() returns a new Indent.
    """
    depth: int = 0

    STEP: ClassVar[int] = 2
    CHAR: ClassVar[str] = " "

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Indent depth must be non-negative, got {self.depth}")

    def offset(self) -> "Indent":
        return type(self)(self.depth + self.STEP)

    def prefix(self) -> str:
        return self.CHAR * self.depth

    render_prefix = prefix


class Line(NamedTuple):
    indent: Indent
    value: str

    def __str__(self) -> str:
        if not self.value:
            return self.value
        return self.indent.prefix() + self.value

    def extended(self, suffix: str) -> "Line":
        return Line(self.indent, self.value + suffix)
