from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DocsumConfig, configure_logging
from .preprocessing import default_stopwords, load_stopwords
from .summarize import extract_keywords, format_keywords, summarize

logger = logging.getLogger(__name__)


def _read_input(path: Path) -> str | None:
    if not path.exists():
        print(f"ERROR: input not found: {path}", file=sys.stderr)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        print("ERROR: input must be UTF-8 text", file=sys.stderr)
        return None
    except OSError as e:
        print(f"ERROR: cannot read input: {e}", file=sys.stderr)
        return None


def main(argv: list[str] | None = None) -> int:
    try:
        config = DocsumConfig.from_env()
    except ValueError as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return 2

    parser = argparse.ArgumentParser(prog="docsum", description="Extractive summaries and keywords")
    parser.add_argument("--stopwords", default=config.stopwords_path, help="Stopword file, one word per line")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    s = sub.add_parser("summarize", help="Summarize a .txt/.md file")
    s.add_argument("--input", required=True, help="Path to input text file")
    s.add_argument("--percentage", type=int, default=config.percentage, help="Share of sentences to keep (0-100)")
    s.add_argument("--output", default=None, help="Write the summary here instead of stdout")
    s.add_argument("--force", action="store_true", help="Overwrite output if exists")

    k = sub.add_parser("keywords", help="Extract ranked keywords from a .txt/.md file")
    k.add_argument("--input", required=True, help="Path to input text file")
    k.add_argument("--limit", type=int, default=config.keyword_limit)

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else config.log_level)
    logger.debug("Running %s on %s", args.command, args.input)

    text = _read_input(Path(args.input))
    if text is None:
        return 2
    stopwords = load_stopwords(args.stopwords) if args.stopwords else default_stopwords()

    if args.command == "summarize":
        out_path = Path(args.output) if args.output else None
        if out_path is not None and out_path.exists() and not args.force:
            print(f"ERROR: output already exists: {out_path} (use --force to overwrite)", file=sys.stderr)
            return 2
        summary = summarize(text, percentage=args.percentage, stopwords=stopwords)
        if out_path is None:
            print(summary)
        else:
            try:
                out_path.parent.mkdir(parents=True, exist_ok=True)
                out_path.write_text(summary, encoding="utf-8")
            except OSError as e:
                print(f"ERROR: cannot write output: {e}", file=sys.stderr)
                return 2
            print(f"OK: wrote {out_path}")
        return 0

    if args.command == "keywords":
        if args.limit < 0:
            print("ERROR: --limit must be >= 0", file=sys.stderr)
            return 2
        print(format_keywords(extract_keywords(text, limit=args.limit, stopwords=stopwords)))
        return 0

    print("ERROR: unknown command", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
