from .datatypes import Sentence, Document, TermModel, Centroid, ScoredSentence, Edge, HITSNode, CooccurrenceGraph, HITSScores, FeatureVector
from .config import DocsumConfig, configure_logging
from .preprocessing import StopwordsUnavailableWarning, load_stopwords, default_stopwords, preprocess_sentences, segment, original_sentences
from .features import TermModelError, build_term_model, centroid_values, centroid_document, extract_features
from .graphing import build_graph, to_networkx
from .scoring import score_sentences, run_hits, rank_scores, rank_terms
from .summarize import select_sentences, select_keywords, summarize_sentences, rank_keywords, summarize, extract_keywords, format_keywords
