"""Runtime defaults for the summarizer and keyword extractor."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PERCENTAGE = 50
DEFAULT_KEYWORD_LIMIT = 20
DEFAULT_ITERATIONS = 10

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class DocsumConfig:
    """Tunable parameters.

    ``iterations`` drives HITS for the front ends' debug views only; the public
    ``extract_keywords`` always runs the fixed default.
    """

    # share of sentences kept in the summary, 0-100 (clamped when used)
    percentage: int = DEFAULT_PERCENTAGE
    # maximum number of keywords returned
    keyword_limit: int = DEFAULT_KEYWORD_LIMIT
    # HITS update rounds
    iterations: int = DEFAULT_ITERATIONS
    # custom stopword file, one word per line; None uses the packaged list
    stopwords_path: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.keyword_limit < 0:
            raise ValueError(f"keyword_limit must be >= 0, got {self.keyword_limit}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL
        ):
            raise ValueError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DocsumConfig":
        env = os.environ if environ is None else environ
        return cls(
            percentage=int(env.get("DOCSUM_PERCENTAGE", DEFAULT_PERCENTAGE)),
            keyword_limit=int(env.get("DOCSUM_KEYWORD_LIMIT", DEFAULT_KEYWORD_LIMIT)),
            stopwords_path=env.get("DOCSUM_STOPWORDS") or None,
            log_level=env.get("DOCSUM_LOG_LEVEL", "INFO"),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
