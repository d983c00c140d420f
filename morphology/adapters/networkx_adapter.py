"""
Conversion between SegmentTree and networkx directed graphs.

Each segment becomes a graph node keyed by its id with ``prox``, ``dist``
and ``tag`` attributes; each parent link becomes an edge parent -> child.
"""

from typing import Dict, Hashable, Tuple
import logging
import networkx as nx

from ..core.tree import SegmentTree

logger = logging.getLogger(__name__)


def to_networkx_graph(tree: SegmentTree) -> nx.DiGraph:
    """
    Convert a segment tree to a directed graph.

    Parameters
    ----------
    tree : SegmentTree
        Tree to convert

    Returns
    -------
    nx.DiGraph
        One node per segment id, edges from parent to child
    """
    graph = nx.DiGraph()
    for seg in tree.segments:
        graph.add_node(seg.id, prox=seg.prox, dist=seg.dist, tag=seg.tag)
    for child, parent in enumerate(tree.parents):
        if parent is not None:
            graph.add_edge(parent, child)
    return graph


def from_networkx_graph(graph: nx.DiGraph) -> Tuple[SegmentTree, Dict[Hashable, int]]:
    """
    Build a segment tree from a directed forest.

    Nodes are appended in lexicographic topological order so parents always
    come before their children and the result does not depend on insertion
    order. Node keys must therefore be mutually comparable.

    Parameters
    ----------
    graph : nx.DiGraph
        Directed forest whose nodes carry ``prox``, ``dist`` and ``tag``

    Returns
    -------
    tree : SegmentTree
        The rebuilt tree
    id_map : dict
        Graph node -> segment id in ``tree``

    Raises
    ------
    ValueError
        If the graph is not a directed forest or a node lacks an attribute
    """
    if graph.number_of_nodes() and not nx.is_directed_acyclic_graph(graph):
        raise ValueError("Graph contains a cycle")
    for node, degree in graph.in_degree():
        if degree > 1:
            raise ValueError(f"Node {node!r} has {degree} parents")

    tree = SegmentTree()
    tree.reserve(graph.number_of_nodes())
    id_map: Dict[Hashable, int] = {}

    for node in nx.lexicographical_topological_sort(graph):
        attrs = graph.nodes[node]
        missing = [k for k in ("prox", "dist", "tag") if k not in attrs]
        if missing:
            raise ValueError(f"Node {node!r} is missing attributes: {missing}")

        preds = list(graph.predecessors(node))
        parent = id_map[preds[0]] if preds else None
        id_map[node] = tree.append(parent, attrs["prox"], attrs["dist"], attrs["tag"])

    logger.debug(f"Built segment tree with {tree.size} segments from graph")
    return tree, id_map


__all__ = ["to_networkx_graph", "from_networkx_graph"]
