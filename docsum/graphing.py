from __future__ import annotations
from typing import List, Sequence
import networkx as nx
from .datatypes import CooccurrenceGraph, HITSNode

def build_graph(sentences: Sequence[Sequence[str]], vocabulary: List[str]) -> CooccurrenceGraph:
    """
    Directed word co-occurrence graph: an edge u -> v whenever v directly follows u
    in a sentence. Every vocabulary term gets a node, isolated or not, so node ids
    match vocabulary indices.
    """
    index = {t: i for i, t in enumerate(vocabulary)}
    nodes = [HITSNode() for _ in vocabulary]
    for s in sentences:
        for cur, nxt in zip(s, s[1:]):
            c, n = index[cur], index[nxt]
            nodes[c].outgoing.add(n)
            nodes[n].incoming.add(c)
    return CooccurrenceGraph(terms=list(vocabulary), nodes=nodes)

def to_networkx(graph: CooccurrenceGraph) -> nx.DiGraph:
    G = nx.DiGraph()
    for i, term in enumerate(graph.terms):
        G.add_node(i, label=term)
    G.add_edges_from((e.source, e.target) for e in graph.edges)
    return G
