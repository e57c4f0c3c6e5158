from __future__ import annotations
from typing import List
import logging
import math
from .config import DEFAULT_ITERATIONS
from .datatypes import CooccurrenceGraph, FeatureVector, HITSScores, ScoredSentence

logger = logging.getLogger(__name__)

def score_sentences(features: List[FeatureVector]) -> List[ScoredSentence]:
    # composite MEAD score = centroid + position + first-sentence overlap
    return [ScoredSentence(idx=i, score=sum(f.values())) for i, f in enumerate(features)]

def _l2_normalize(values: List[float]) -> List[float]:
    norm = math.sqrt(sum(v * v for v in values))
    if norm == 0.0:
        return values  # all zeros; leave as is instead of producing NaN
    return [v / norm for v in values]

def run_hits(graph: CooccurrenceGraph, iterations: int = DEFAULT_ITERATIONS) -> HITSScores:
    """
    Compute hub and authority scores for every node of the co-occurrence graph.

    Each iteration:
      auth(v) = sum(hub(u) for u -> v), then L2-normalize
      hub(v)  = sum(auth(w) for v -> w), using the fresh authorities, then L2-normalize

    Args:
        graph: Word co-occurrence graph
        iterations: Fixed number of update rounds (no convergence test)

    Returns:
        HITSScores with hub and authority lists indexed by term id
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    n = len(graph.nodes)
    hub = [1.0] * n
    authority = [1.0] * n

    # rounds depend on each other; keep them strictly sequential
    for _ in range(iterations):
        authority = _l2_normalize([sum(hub[u] for u in node.incoming) for node in graph.nodes])
        hub = _l2_normalize([sum(authority[w] for w in node.outgoing) for node in graph.nodes])

    return HITSScores(hub=hub, authority=authority)

def rank_scores(scores: HITSScores) -> List[int]:
    """Term ids by descending (authority + hub) / 2; ties keep ascending id (alphabetical) order."""
    combined = scores.combined()
    return sorted(range(len(combined)), key=lambda i: combined[i], reverse=True)

def rank_terms(graph: CooccurrenceGraph, iterations: int = DEFAULT_ITERATIONS) -> List[int]:
    ranked = rank_scores(run_hits(graph, iterations=iterations))
    logger.debug("HITS ranked %d terms over %d iterations", len(ranked), iterations)
    return ranked
