"""
Command-line entry point.

Trains a model on a corpus file and prints a continuation of the seed text:

    char-lm 3 "the " 200 fixed corpus.txt
    char-lm 5 "Once upon" 500 random corpus.txt --dump

Seed modes: "fixed" reproduces the same text on every run, "random" does not.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import ModelConfig, NormalizeConfig, SEED_MODES
from .corpus import iter_corpus, read_corpus
from .language_model import LanguageModel

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-lm",
        description="Character-level sliding-window language model"
    )

    parser.add_argument("window_length", type=_positive_int, help="Characters per window")
    parser.add_argument("initial_text", help="Text to continue")
    parser.add_argument("text_length", type=_non_negative_int, help="Number of characters to generate")
    parser.add_argument(
        "seed_mode",
        choices=SEED_MODES,
        help="'fixed' for reproducible output, 'random' for a fresh seed every run"
    )
    parser.add_argument("corpus", help="Path to the training corpus")

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Explicit fixed seed (overrides the seed mode)"
    )
    parser.add_argument("--encoding", default="utf-8", help="Corpus file encoding")
    parser.add_argument("--lowercase", action="store_true", help="Lowercase the corpus")
    parser.add_argument("--strip-accents", action="store_true", help="Remove combining accents")
    parser.add_argument(
        "--normalize-whitespace",
        action="store_true",
        help="Collapse whitespace runs into single spaces"
    )
    parser.add_argument("--dump", action="store_true", help="Print the trained window map")
    parser.add_argument("--dump-csv", default=None, help="Write the trained window map as CSV")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level INFO")

    return parser


def run(args: argparse.Namespace) -> str:
    """Train on the corpus named in `args` and return the generated text."""

    config = ModelConfig.from_seed_mode(args.window_length, args.seed_mode, seed=args.seed)
    normalize = NormalizeConfig(
        lowercase=args.lowercase,
        strip_accents=args.strip_accents,
        normalize_whitespace=args.normalize_whitespace,
    )

    model = LanguageModel.from_config(config)
    if normalize.enabled:
        model.train(read_corpus(args.corpus, encoding=args.encoding, normalize=normalize))
    else:
        model.train(iter_corpus(args.corpus, encoding=args.encoding))

    if args.dump:
        print(model, end="")
    if args.dump_csv:
        model.to_frame().to_csv(args.dump_csv, index=False)
        logger.info(f"Wrote window map to {args.dump_csv}")

    return model.generate(args.initial_text, args.text_length)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "INFO" if args.verbose and args.log_level == "WARNING" else args.log_level
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)

    try:
        text = run(args)
    except FileNotFoundError as e:
        logger.error(f"Corpus file not found: {e.filename}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not generate text: {e}")
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
