import struct
from offline_graph.cursor import HEADER_SIZE, NodeCursor
from offline_graph.errors import TruncatedGraphError, UnsupportedGraphOperation


class OfflineGraph:
    """A graph stored in the integer-list format, readable only sequentially.

    The file holds a big-endian 64-bit node count, followed, for each node in
    order, by its outdegree and its successors (all big-endian 64-bit).
    Only the node count is read here; adjacency data is streamed by cursors.
    """

    def __init__(self, filename):
        self.filename = str(filename)
        with open(self.filename, "rb") as f:
            hdr = f.read(HEADER_SIZE)
        if len(hdr) < HEADER_SIZE:
            raise TruncatedGraphError(f"{self.filename}: header needs {HEADER_SIZE} bytes, found {len(hdr)}")
        self._num_nodes, = struct.unpack(">Q", hdr)

    def num_nodes(self):
        return self._num_nodes

    def node_cursor(self, validate=False):
        """Open a new independent cursor positioned before the first node."""
        return NodeCursor(self.filename, self._num_nodes, validate=validate)

    def successors(self, node):
        raise UnsupportedGraphOperation("random access is not supported; use node_cursor()")

    def outdegree(self, node):
        raise UnsupportedGraphOperation("random access is not supported; use node_cursor()")

    def __repr__(self):
        return f"OfflineGraph({self.filename!r}, num_nodes={self._num_nodes})"


def load(filename):
    raise UnsupportedGraphOperation("graphs in this format may be loaded offline only")


def load_offline(filename):
    return OfflineGraph(filename)
