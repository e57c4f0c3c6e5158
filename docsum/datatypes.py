from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Set

@dataclass
class Sentence:
    idx: int
    text: str  # original substring, trailing whitespace included
    tokens: List[str] = field(default_factory=list)

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]

    def token_lists(self) -> List[List[str]]:
        return [list(s.tokens) for s in self.sentences]

@dataclass
class TermModel:
    vocabulary: List[str]            # alphabetical, index == term id
    doc_freq: Dict[str, Set[int]]    # term -> sentence indices containing it
    avg_freq: Dict[str, float]       # term -> occurrences / sentence count
    sentence_count: int

    def index_of(self) -> Dict[str, int]:
        return {t: i for i, t in enumerate(self.vocabulary)}

@dataclass
class Centroid:
    weights: List[float]  # one per vocabulary index
    terms: List[str]      # centroid pseudo-document

@dataclass
class ScoredSentence:
    idx: int
    score: float

@dataclass
class Edge:
    source: int
    target: int

@dataclass
class HITSNode:
    incoming: Set[int] = field(default_factory=set)
    outgoing: Set[int] = field(default_factory=set)

@dataclass
class CooccurrenceGraph:
    terms: List[str]
    nodes: List[HITSNode]

    @property
    def edges(self) -> List[Edge]:
        return [Edge(source=i, target=j) for i, node in enumerate(self.nodes) for j in sorted(node.outgoing)]

@dataclass
class HITSScores:
    hub: List[float]
    authority: List[float]

    def combined(self) -> List[float]:
        return [(a + h) / 2 for a, h in zip(self.authority, self.hub)]

FeatureVector = Dict[str, float]  # per-sentence sub-scores: centroid, position, first_overlap
