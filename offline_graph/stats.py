from dataclasses import dataclass, field
import numpy as np


@dataclass
class GraphStats:
    nodes: int = 0
    arcs: int = 0
    loops: int = 0
    min_outdegree: int = 0
    max_outdegree: int = 0
    min_outdegree_node: int = 0
    max_outdegree_node: int = 0
    dangling: int = 0
    terminal: int = 0
    outdegree_counts: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.int64))

    @property
    def avg_outdegree(self):
        return self.arcs / self.nodes if self.nodes else 0.0

    @property
    def perc_dangling(self):
        return 100.0 * self.dangling / self.nodes if self.nodes else 0.0


def graph_stats(graph, validate=False):
    """Scan the graph once and collect basic degree statistics."""
    stats = GraphStats(nodes=graph.num_nodes())
    degrees = np.zeros(stats.nodes, dtype=np.int64)
    mind = None
    with graph.node_cursor(validate=validate) as cursor:
        for node in cursor:
            d = cursor.outdegree()
            successors = cursor.successors()
            degrees[node] = d
            stats.arcs += d
            stats.loops += int(np.count_nonzero(successors == node))
            if d == 0:
                stats.dangling += 1
                stats.terminal += 1
            elif d == 1 and successors[0] == node:
                stats.terminal += 1
            if mind is None or d < mind:
                mind = d
                stats.min_outdegree_node = node
            if d > stats.max_outdegree:
                stats.max_outdegree = d
                stats.max_outdegree_node = node
    stats.min_outdegree = mind or 0
    stats.outdegree_counts = np.bincount(degrees)
    return stats


def format_stats(stats):
    """Render stats as key=value lines."""
    lines = [
        f"nodes={stats.nodes}",
        f"arcs={stats.arcs}",
        f"loops={stats.loops}",
        f"minoutdegree={stats.min_outdegree}",
        f"maxoutdegree={stats.max_outdegree}",
        f"minoutdegreenode={stats.min_outdegree_node}",
        f"maxoutdegreenode={stats.max_outdegree_node}",
        f"dangling={stats.dangling}",
        f"terminal={stats.terminal}",
        f"percdangling={stats.perc_dangling}",
        f"avgoutdegree={stats.avg_outdegree}",
    ]
    return "\n".join(lines)
