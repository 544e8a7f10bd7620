import os
import struct
import numpy as np
from offline_graph.errors import CursorStateError, MalformedGraphError, TruncatedGraphError

HEADER_SIZE = 8
FIELD_SIZE = 8
SUCCESSOR_DTYPE = np.dtype(">u8")
INITIAL_CAPACITY = 16


class NodeCursor:
    """Forward-only, one-shot cursor over the adjacency records of a graph file.

    The cursor owns its file stream; use it as a context manager (or call
    close()) so the stream is released even if iteration stops early.
    """

    def __init__(self, filename, num_nodes, validate=False):
        self.filename = filename
        self.num_nodes = num_nodes
        self.validate = validate
        self.node = -1
        self._outdegree = 0
        self._successors = np.empty(INITIAL_CAPACITY, dtype=SUCCESSOR_DTYPE)
        self._decoded = False
        self._failure = None
        self._invalid = None
        self._stream = open(filename, "rb")
        try:
            self._size = os.fstat(self._stream.fileno()).st_size
            self._stream.seek(HEADER_SIZE)  # skip number of nodes
        except BaseException:
            self._stream.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __iter__(self):
        return self

    def __next__(self):
        return self.advance()

    @property
    def closed(self):
        return self._stream.closed

    def close(self):
        self._stream.close()

    def has_next(self):
        return self.node < self.num_nodes - 1

    def advance(self):
        """Move to the next node and read its outdegree. Returns the node index."""
        if not self.has_next():
            raise StopIteration
        self._check_usable()
        try:
            if self.node >= 0 and not self._decoded:
                # successors of the previous node were never requested
                self._check_remaining(self._outdegree)
                self._stream.seek(FIELD_SIZE * self._outdegree, os.SEEK_CUR)
            hdr = self._stream.read(FIELD_SIZE)
            if len(hdr) < FIELD_SIZE:
                raise TruncatedGraphError(
                    f"{self.filename}: missing outdegree of node {self.node + 1}")
            outdegree, = struct.unpack(">Q", hdr)
        except OSError as e:
            self._fail(e)
            raise
        self._outdegree = outdegree
        self._decoded = False
        self._invalid = None
        self.node += 1
        return self.node

    def outdegree(self):
        self._check_positioned()
        return self._outdegree

    def successors(self):
        """Return the successors of the current node as a view into the cursor's buffer.

        The view is overwritten by the next advance(); copy it to keep it.
        """
        self._check_positioned()
        d = self._outdegree
        if not self._decoded:
            try:
                self._check_remaining(d)
                self._ensure_capacity(d)
                self._read_into(self._successors[:d].view(np.uint8))
            except OSError as e:
                self._fail(e)
                raise
            self._decoded = True
            if self.validate:
                try:
                    self._validate(self._successors[:d])
                except MalformedGraphError as e:
                    self._invalid = e
                    raise
        if self._invalid is not None:
            raise self._invalid
        return self._successors[:d]

    def _check_remaining(self, d):
        remaining = self._size - self._stream.tell()
        if d > remaining // FIELD_SIZE:
            raise TruncatedGraphError(
                f"{self.filename}: node {self.node} declares {d} successors "
                f"but only {remaining} bytes remain")

    def _ensure_capacity(self, length):
        capacity = len(self._successors)
        if length <= capacity:
            return
        self._successors = np.empty(max(length, capacity + (capacity >> 1)), dtype=SUCCESSOR_DTYPE)

    def _read_into(self, buf):
        view = memoryview(buf)
        filled = 0
        while filled < len(view):
            n = self._stream.readinto(view[filled:])
            if not n:
                raise TruncatedGraphError(
                    f"{self.filename}: node {self.node} has {self._outdegree} successors "
                    f"but only {filled // FIELD_SIZE} were read")
            filled += n

    def _validate(self, successors):
        if len(successors) == 0:
            return
        if np.any(successors[1:] <= successors[:-1]):
            raise MalformedGraphError(f"successors of node {self.node} are not strictly increasing")
        if int(successors[-1]) >= self.num_nodes:
            raise MalformedGraphError(
                f"node {self.node} has successor {int(successors[-1])} >= {self.num_nodes}")

    def _fail(self, error):
        self._failure = error
        self._stream.close()

    def _check_usable(self):
        if self._failure is not None:
            raise CursorStateError("cursor is unusable after a read failure") from self._failure
        if self._stream.closed:
            raise CursorStateError("cursor is closed")

    def _check_positioned(self):
        self._check_usable()
        if self.node == -1:
            raise CursorStateError("advance() must be called before reading node data")
