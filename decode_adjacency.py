import sys
from offline_graph.graph import load_offline

def decode_adjacency(filename="adjacency.bin"):
    """Decode and print an integer-list graph file in a readable format."""
    try:
        graph = load_offline(filename)
        with graph.node_cursor() as cursor:
            entry_count = 0
            for node in cursor:
                dest_ids = cursor.successors().tolist()
                print(f"Node {node} -> {dest_ids}")
                entry_count += 1

            print(f"\nTotal entries: {entry_count}")

    except FileNotFoundError:
        print(f"Error: File '{filename}' not found.")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error reading file: {e}")
        sys.exit(1)

if __name__ == "__main__":
    filename = sys.argv[1] if len(sys.argv) > 1 else "adjacency.bin"
    decode_adjacency(filename)
