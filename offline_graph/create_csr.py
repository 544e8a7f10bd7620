# build CSR arrays from an integer-list graph
import os
import numpy as np

OUT_DIR = "data"
INDPTR_FILE = "indptr.dat"
INDICES_FILE = "indices.dat"


def first_pass_count_edges(graph):
    """Returns E (total edges) and outdeg array (int64)."""
    N = graph.num_nodes()
    outdeg = np.zeros(N, dtype=np.int64)
    E = 0
    with graph.node_cursor() as cursor:
        for node in cursor:
            # successors are skipped by the cursor on the next advance
            num = cursor.outdegree()
            outdeg[node] = num
            E += num
    return E, outdeg


def _memmap(path, length):
    if length == 0:
        # numpy cannot map an empty file
        open(path, "wb").close()
        return np.empty(0, dtype=np.int64)
    return np.memmap(path, dtype=np.int64, mode="w+", shape=(length,))


def build_memmaps(graph, E, outdeg, out_dir=OUT_DIR):
    N = len(outdeg)
    indptr = _memmap(os.path.join(out_dir, INDPTR_FILE), N + 1)
    indices = _memmap(os.path.join(out_dir, INDICES_FILE), E)
    # fill indptr via prefix sums
    indptr[0] = 0
    np.cumsum(outdeg, out=indptr[1:])
    # pass 2: fill indices
    with graph.node_cursor() as cursor:
        for node in cursor:
            num = cursor.outdegree()
            if num != outdeg[node]:
                raise ValueError(f"outdegree of node {node} changed between passes")
            if num == 0:
                continue
            start = int(indptr[node])
            indices[start:start + num] = cursor.successors()
    # flush
    for arr in (indptr, indices):
        if isinstance(arr, np.memmap):
            arr.flush()
    return indptr, indices


def create_csr(graph, out_dir=OUT_DIR):
    """Convert graph to CSR files in out_dir. Returns (num_nodes, num_arcs)."""
    os.makedirs(out_dir, exist_ok=True)
    E, outdeg = first_pass_count_edges(graph)
    build_memmaps(graph, E, outdeg, out_dir)
    return graph.num_nodes(), E


def _load(path):
    if os.path.getsize(path) == 0:
        return np.empty(0, dtype=np.int64)
    return np.memmap(path, dtype=np.int64, mode="r")


def load_csr(out_dir=OUT_DIR):
    """Load CSR arrays produced by create_csr."""
    indptr = _load(os.path.join(out_dir, INDPTR_FILE))
    indices = _load(os.path.join(out_dir, INDICES_FILE))
    if len(indptr) == 0:
        raise ValueError("Indptr file is empty; run create_csr first.")
    n = len(indptr) - 1
    if indptr[-1] != len(indices):
        raise ValueError(f"indptr ends at {indptr[-1]} but there are {len(indices)} indices")
    return indptr, indices, n
