class ToolboxError(Exception):
    """Base class for every error raised by the toolbox package."""


class BoxIndexError(ToolboxError, IndexError):
    """A box was indexed past its children."""

    def __init__(self, name: str, index: int, size: int):
        super().__init__(
            f"Box {name!r} has {size} child(ren), index {index} is out of range"
        )
        self.name = name
        self.index = index
        self.size = size


class NotABoxError(ToolboxError, TypeError):
    """An item was used as a box but is a leaf."""


class ClosedError(ToolboxError, RuntimeError):
    """A box or factory was used after close()."""
