import sys
from offline_graph.create_csr import create_csr, load_csr, OUT_DIR, INDPTR_FILE, INDICES_FILE
from offline_graph.graph import load_offline
from offline_graph.stats import graph_stats, format_stats

ADJ_BIN = "data/adjacency.bin"

def main(argv):
    filename = argv[1] if len(argv) > 1 else ADJ_BIN
    out_dir = argv[2] if len(argv) > 2 else OUT_DIR

    try:
        graph = load_offline(filename)
        print(f"Loaded {filename}: {graph.num_nodes()} nodes")

        print("Computing stats...")
        print(format_stats(graph_stats(graph)))

        print("Building CSR...")
        num_nodes, num_arcs = create_csr(graph, out_dir)
        print("Total edges E =", num_arcs)
        print("Built memmaps:", INDPTR_FILE, INDICES_FILE, "in", out_dir)

        indptr, indices, n = load_csr(out_dir)
        if n != num_nodes:
            raise ValueError(f"CSR has {n} nodes, expected {num_nodes}")
    except FileNotFoundError:
        print(f"Error: File '{filename}' not found.")
        return 1
    except (OSError, ValueError) as e:
        print(f"Error converting {filename}: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv))
