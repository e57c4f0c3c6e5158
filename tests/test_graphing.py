from docsum.datatypes import Edge
from docsum.graphing import build_graph, to_networkx


def test_edges_follow_word_order_and_are_deduplicated():
    graph = build_graph([["a", "b", "a", "b"]], ["a", "b"])
    assert graph.nodes[0].outgoing == {1}
    assert graph.nodes[0].incoming == {1}
    assert graph.nodes[1].outgoing == {0}
    assert graph.nodes[1].incoming == {0}
    assert graph.edges == [Edge(0, 1), Edge(1, 0)]


def test_isolated_terms_keep_their_node():
    graph = build_graph([["a"], ["b", "c"], []], ["a", "b", "c"])
    assert graph.terms == ["a", "b", "c"]
    assert len(graph.nodes) == 3
    assert not graph.nodes[0].incoming and not graph.nodes[0].outgoing
    assert graph.edges == [Edge(1, 2)]


def test_no_edges_across_sentence_boundaries():
    graph = build_graph([["a", "b"], ["c", "d"]], ["a", "b", "c", "d"])
    assert 2 not in graph.nodes[1].outgoing
    assert len(graph.edges) == 2


def test_networkx_view():
    graph = build_graph([["a"], ["b", "c"]], ["a", "b", "c"])
    G = to_networkx(graph)
    assert G.number_of_nodes() == 3
    assert G.has_edge(1, 2)
    assert not G.has_edge(2, 1)
    assert G.nodes[0]["label"] == "a"
