from __future__ import annotations
import logging
import re
import warnings
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union
from .datatypes import Document, Sentence

logger = logging.getLogger(__name__)

_SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+")
_TOKEN_RE = re.compile(r"\w+(?:'\w+)?|[^\w\s]")
_ALNUM_RE = re.compile(r"[A-Za-z0-9]")  # a token without one of these is punctuation

STOPLIST_RESOURCE = "resources/stoplist.txt"


class StopwordsUnavailableWarning(UserWarning):
    """The stopword list could not be read; preprocessing keeps every word."""


# --- tokenizer ---------------------------------------------------------------

def split_sentence_spans(text: str) -> List[Tuple[int, int]]:
    """
    Split text into sentence spans (start, end).

    A sentence ends after '.', '!' or '?' followed by whitespace; the whitespace
    belongs to the sentence before it, so the spans tile the whole text and
    ``"".join(text[s:e] for s, e in spans) == text`` for any non-blank text.
    """
    if not text.strip():
        return []
    spans: List[Tuple[int, int]] = []
    start = 0
    for m in _SENTENCE_BREAK_RE.finditer(text):
        end = m.end()
        if text[start:end].strip():
            spans.append((start, end))
            start = end
    if start < len(text):
        if text[start:].strip():
            spans.append((start, len(text)))
        elif spans:
            # trailing whitespace only; fold it into the last sentence
            spans[-1] = (spans[-1][0], len(text))
    return spans

def tokenize(sentence: str) -> List[str]:
    # words (with an optional apostrophe suffix) and single punctuation marks, in order
    return [m.group(0) for m in _TOKEN_RE.finditer(sentence)]

def segment(text: str) -> Document:
    sentences = []
    for i, (s, e) in enumerate(split_sentence_spans(text)):
        chunk = text[s:e]
        sentences.append(Sentence(idx=i, text=chunk, tokens=tokenize(chunk)))
    return Document(raw_text=text, sentences=sentences)

def original_sentences(text: str) -> List[str]:
    """Original sentence strings with whitespace intact (invertible mode)."""
    return [text[s:e] for s, e in split_sentence_spans(text)]


# --- stopwords ---------------------------------------------------------------

def parse_stopwords(lines: Iterable[str]) -> FrozenSet[str]:
    words = set()
    for line in lines:
        w = line.strip().lower()
        if w and not w.startswith("#"):
            words.add(w)
    return frozenset(words)

def load_stopwords(path: Optional[Union[str, Path]] = None) -> FrozenSet[str]:
    """
    Read a stopword list, one lower-case word per line.

    Without ``path`` the packaged stoplist is used. A list that cannot be read is
    not fatal: a StopwordsUnavailableWarning is issued and the empty set returned.
    """
    try:
        if path is None:
            content = resources.files("docsum").joinpath(STOPLIST_RESOURCE).read_text(encoding="utf-8")
        else:
            content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        source = path if path is not None else STOPLIST_RESOURCE
        logger.warning("Stopword list unavailable (%s): %s; continuing without stopwords", source, e)
        warnings.warn(f"stopword list unavailable: {source}", StopwordsUnavailableWarning, stacklevel=2)
        return frozenset()
    stopwords = parse_stopwords(content.splitlines())
    logger.debug("Loaded %d stopwords", len(stopwords))
    return stopwords

@lru_cache(maxsize=1)
def default_stopwords() -> FrozenSet[str]:
    # loaded once per process, read-only afterwards
    return load_stopwords()


# --- preprocessor ------------------------------------------------------------

def make_lowercase(sentences: Sequence[Sequence[str]]) -> List[List[str]]:
    return [[t.lower() for t in s] for s in sentences]

def remove_punctuation(sentences: Sequence[Sequence[str]]) -> List[List[str]]:
    return [[t for t in s if _ALNUM_RE.search(t)] for s in sentences]

def remove_stopwords(sentences: Sequence[Sequence[str]], stopwords: FrozenSet[str]) -> List[List[str]]:
    return [[t for t in s if t not in stopwords] for s in sentences]

def preprocess_sentences(sentences: Sequence[Sequence[str]],
                         stopwords: Optional[Iterable[str]] = None) -> List[List[str]]:
    """
    Normalize tokenized sentences: lowercase, drop punctuation, drop stopwords.

    Lowercasing runs first because the stopword list is lower-case. Sentences left
    empty are kept so indices stay aligned with the original document.
    """
    out = remove_punctuation(make_lowercase(sentences))
    if stopwords:
        out = remove_stopwords(out, frozenset(stopwords))
    return out
