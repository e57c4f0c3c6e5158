from __future__ import annotations
from typing import Dict, List, Sequence, Set, Tuple
from collections import Counter
import logging
import math
from .datatypes import Centroid, FeatureVector, TermModel

logger = logging.getLogger(__name__)

CENTROID_FRACTION = 0.1  # share of the vocabulary kept in the centroid document


class TermModelError(RuntimeError):
    """Internal inconsistency in a term model (e.g. a vocabulary term with df == 0)."""


def _doc_frequencies(sentences: Sequence[Sequence[str]]) -> Dict[str, Set[int]]:
    # a sentence counts once per term, however often the term repeats in it
    df: Dict[str, Set[int]] = {}
    for i, s in enumerate(sentences):
        for tok in s:
            df.setdefault(tok, set()).add(i)
    return df

def _average_term_frequencies(sentences: Sequence[Sequence[str]]) -> Dict[str, float]:
    """avg_freq(t) = total occurrences of t / number of sentences"""
    totals = Counter()
    for s in sentences:
        totals.update(s)
    n = len(sentences)
    if n == 0:
        return {}
    return {t: c / n for t, c in totals.items()}

def build_term_model(sentences: Sequence[Sequence[str]]) -> TermModel:
    df = _doc_frequencies(sentences)
    return TermModel(
        vocabulary=sorted(df),
        doc_freq=df,
        avg_freq=_average_term_frequencies(sentences),
        sentence_count=len(sentences),
    )

def centroid_values(model: TermModel) -> List[float]:
    """
    Centroid weight per vocabulary index:
      avg_freq(t) * log10(N / df(t))
    No values exist for an empty collection.
    """
    n = model.sentence_count
    if n == 0:
        return []
    weights: List[float] = []
    for term in model.vocabulary:
        df = len(model.doc_freq.get(term, ()))
        if df == 0:
            raise TermModelError(f"term {term!r} is in the vocabulary but occurs in no sentence")
        weights.append(model.avg_freq[term] * math.log10(n / df))
    return weights

def centroid_document(model: TermModel, weights: List[float], fraction: float = CENTROID_FRACTION) -> List[str]:
    """
    Top-weighted terms forming the centroid pseudo-document.

    Size is max(1, floor(V * fraction)), or 0 for an empty vocabulary. Equal
    weights keep vocabulary (alphabetical) order.
    """
    total = len(weights)
    top = int(total * fraction)
    if top < 1 and total > 0:
        top = 1
    order = sorted(range(total), key=lambda i: weights[i], reverse=True)
    return [model.vocabulary[i] for i in order[:top]]

def build_centroid(model: TermModel) -> Centroid:
    weights = centroid_values(model)
    return Centroid(weights=weights, terms=centroid_document(model, weights))

def _centroid_overlaps(sentences: Sequence[Sequence[str]], model: TermModel, centroid: Centroid) -> List[float]:
    # presence counts, not repeats
    index = model.index_of()
    out: List[float] = []
    for s in sentences:
        present = set(s)
        out.append(sum(centroid.weights[index[t]] for t in centroid.terms if t in present))
    return out

def _position_scores(n: int, max_centroid: float) -> List[float]:
    # P(Si) = (N - i) / N * max centroid score ; i is 0-based
    return [((n - i) / n) * max_centroid for i in range(n)]

def _sentence_vectors(sentences: Sequence[Sequence[str]], vocabulary: List[str]) -> List[List[int]]:
    vecs = []
    for s in sentences:
        counts = Counter(s)
        vecs.append([counts.get(t, 0) for t in vocabulary])
    return vecs

def _first_sentence_overlaps(vectors: List[List[int]]) -> List[int]:
    # unnormalized dot product with sentence 0 (not cosine)
    if not vectors:
        return []
    first = vectors[0]
    return [sum(a * b for a, b in zip(v, first)) for v in vectors]

def extract_features(sentences: Sequence[Sequence[str]]) -> Tuple[List[FeatureVector], TermModel, Centroid]:
    """
    Per-sentence MEAD sub-scores: centroid overlap, position, first-sentence overlap.

    Returns the feature vectors together with the term model and centroid they
    were computed from, all built fresh for this call.
    """
    model = build_term_model(sentences)
    n = model.sentence_count
    if n == 0:
        return [], model, Centroid(weights=[], terms=[])

    centroid = build_centroid(model)
    centroids = _centroid_overlaps(sentences, model, centroid)
    positions = _position_scores(n, max(centroids))
    overlaps = _first_sentence_overlaps(_sentence_vectors(sentences, model.vocabulary))
    logger.debug("Term model: %d sentences, %d terms, centroid=%s", n, len(model.vocabulary), centroid.terms)

    feats: List[FeatureVector] = []
    for i in range(n):
        feats.append({
            "centroid": centroids[i],
            "position": positions[i],
            "first_overlap": float(overlaps[i]),
        })
    return feats, model, centroid
