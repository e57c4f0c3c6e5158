import math

import pytest

from docsum.features import build_term_model
from docsum.graphing import build_graph
from docsum.scoring import rank_scores, rank_terms, run_hits, score_sentences

R = 1 / math.sqrt(2)


def _graph(sentences):
    return build_graph(sentences, build_term_model(sentences).vocabulary)


def test_score_is_sum_of_features():
    feats = [{"centroid": 0.5, "position": 0.25, "first_overlap": 2.0}, {"centroid": 0.0, "position": 0.1, "first_overlap": 0.0}]
    scored = score_sentences(feats)
    assert [s.idx for s in scored] == [0, 1]
    assert [s.score for s in scored] == pytest.approx([2.75, 0.1])


def test_hub_reads_outgoing_edges():
    # a -> b: a is a pure hub, b a pure authority
    scores = run_hits(_graph([["a", "b"]]))
    assert scores.hub == pytest.approx([1.0, 0.0])
    assert scores.authority == pytest.approx([0.0, 1.0])


def test_hub_and_authority_fan_out():
    # z -> a, z -> b
    graph = _graph([["z", "a"], ["z", "b"]])
    scores = run_hits(graph)
    assert graph.terms == ["a", "b", "z"]
    assert scores.authority == pytest.approx([R, R, 0.0])
    assert scores.hub == pytest.approx([0.0, 0.0, 1.0])
    assert rank_terms(graph) == [2, 0, 1]


def test_symmetric_pair_converges_to_equal_scores():
    graph = _graph([["run", "fast", "run"]])
    scores = run_hits(graph)
    assert graph.terms == ["fast", "run"]
    assert scores.hub == pytest.approx([R, R])
    assert scores.authority == pytest.approx([R, R])
    # tie keeps alphabetical order
    assert rank_terms(graph) == [0, 1]


def test_graph_without_edges_stays_zero_not_nan():
    scores = run_hits(_graph([["a"], ["b"]]))
    assert scores.authority == [0.0, 0.0]
    assert scores.hub == [0.0, 0.0]
    assert not any(math.isnan(v) for v in scores.combined())


def test_scores_are_non_negative_every_iteration():
    graph = _graph([["a", "b", "c"], ["c", "a"], ["d", "b"], ["e"]])
    for k in range(1, 11):
        scores = run_hits(graph, iterations=k)
        assert all(v >= 0.0 for v in scores.hub + scores.authority)


def test_zero_iterations_keeps_initial_scores():
    scores = run_hits(_graph([["a", "b"]]), iterations=0)
    assert scores.hub == [1.0, 1.0]
    assert scores.authority == [1.0, 1.0]


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        run_hits(_graph([["a", "b"]]), iterations=-1)


def test_empty_graph_ranks_nothing():
    assert rank_terms(_graph([])) == []


def test_ranking_from_precomputed_scores_matches_rank_terms():
    graph = _graph([["z", "a"], ["z", "b"], ["b", "a"]])
    assert rank_scores(run_hits(graph)) == rank_terms(graph)
