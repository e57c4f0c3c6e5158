from __future__ import annotations
from typing import Iterable, List, Optional, Sequence
import logging
from .config import DEFAULT_KEYWORD_LIMIT, DEFAULT_PERCENTAGE
from .datatypes import ScoredSentence
from .preprocessing import default_stopwords, original_sentences, preprocess_sentences, segment
from .features import build_term_model, extract_features
from .graphing import build_graph
from .scoring import rank_terms, score_sentences

logger = logging.getLogger(__name__)

def clamp_percentage(percentage: float) -> float:
    clamped = min(100, max(0, percentage))
    if clamped != percentage:
        logger.debug("Percentage %s clamped to %s", percentage, clamped)
    return clamped

def summary_length(n: int, percentage: float) -> int:
    """max(1, floor(n * percentage / 100)) for a clamped percentage; 0 for an empty document."""
    if n == 0:
        return 0
    k = int(n * clamp_percentage(percentage) / 100)
    return min(n, max(1, k))

def select_sentences(scores: List[ScoredSentence], percentage: float) -> List[int]:
    k = summary_length(len(scores), percentage)
    # highest score first; equal scores keep document order
    ranked = sorted(scores, key=lambda s: s.score, reverse=True)
    return sorted(s.idx for s in ranked[:k])

def select_keywords(ranked: List[int], vocabulary: List[str], limit: int = DEFAULT_KEYWORD_LIMIT) -> List[str]:
    return [vocabulary[i] for i in ranked[:max(0, min(limit, len(vocabulary)))]]

def format_keywords(keywords: Iterable[str]) -> str:
    return ", ".join(keywords)

def build_summary(sentences: List[str], selection: Iterable[int]) -> str:
    chosen = set(selection)
    return "".join(s for i, s in enumerate(sentences) if i in chosen)

# --- pre-tokenized entry points ---------------------------------------------

def summarize_sentences(sentences: Sequence[Sequence[str]], percentage: float = DEFAULT_PERCENTAGE) -> List[int]:
    """MEAD selection over preprocessed sentences: ascending sentence indices."""
    feats, _, _ = extract_features(sentences)
    return select_sentences(score_sentences(feats), percentage)

def rank_keywords(sentences: Sequence[Sequence[str]], limit: int = DEFAULT_KEYWORD_LIMIT) -> List[str]:
    vocabulary = build_term_model(sentences).vocabulary
    graph = build_graph(sentences, vocabulary)
    return select_keywords(rank_terms(graph), vocabulary, limit)

# --- text entry points -------------------------------------------------------

def summarize(text: str, percentage: float = DEFAULT_PERCENTAGE, stopwords: Optional[Iterable[str]] = None) -> str:
    # Pipeline glue
    if not text.strip():
        return ""
    stopwords = default_stopwords() if stopwords is None else stopwords
    doc = segment(text)
    processed = preprocess_sentences(doc.token_lists(), stopwords)
    selection = summarize_sentences(processed, percentage)
    logger.info("Selected %d of %d sentences", len(selection), len(doc.sentences))
    return build_summary(original_sentences(text), selection)

def extract_keywords(text: str, limit: int = DEFAULT_KEYWORD_LIMIT, stopwords: Optional[Iterable[str]] = None) -> List[str]:
    stopwords = default_stopwords() if stopwords is None else stopwords
    doc = segment(text)
    processed = preprocess_sentences(doc.token_lists(), stopwords)
    return rank_keywords(processed, limit)
