class TruncatedGraphError(IOError):
    """The file ends before the header or a record it declares."""


class MalformedGraphError(ValueError):
    """A successor list is out of order or names a node that does not exist."""


class CursorStateError(RuntimeError):
    """A cursor accessor was called out of the advance-then-read order."""


class UnsupportedGraphOperation(NotImplementedError):
    """The graph can only be traversed sequentially."""
