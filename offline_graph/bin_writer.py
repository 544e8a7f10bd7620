import os
import struct


class BinWriter:
    """Writes a graph in the integer-list format, one node record at a time.

    Records must be written in node order, exactly num_nodes of them.
    """

    def __init__(self, filename, num_nodes):
        self.filename = str(filename)
        self.num_nodes = num_nodes
        self.written = 0
        self._f = open(self.filename, "wb")
        try:
            self._f.write(struct.pack(">Q", num_nodes))
        except BaseException:
            self._f.close()
            os.remove(self.filename)
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
        else:
            self._f.close()
        return False

    def write(self, successors):
        if self.written >= self.num_nodes:
            raise ValueError(f"{self.filename}: already wrote all {self.num_nodes} nodes")
        successors = [int(s) for s in successors]
        self._f.write(struct.pack(">Q", len(successors)))
        if successors:
            self._f.write(struct.pack(">" + "Q" * len(successors), *successors))
        self.written += 1

    def close(self):
        if self._f.closed:
            return
        self._f.close()
        if self.written != self.num_nodes:
            raise ValueError(f"{self.filename}: wrote {self.written} of {self.num_nodes} nodes")


def write_graph(filename, successor_lists):
    """Write a whole graph given the successor list of every node, in order."""
    successor_lists = list(successor_lists)
    with BinWriter(filename, len(successor_lists)) as writer:
        for successors in successor_lists:
            writer.write(successors)
    return len(successor_lists)
