"""
Chat Sentiment - CLI.

============================================================
RESPONSIBILITY
============================================================
Command-line interface for scoring chat messages.

- Scores messages given as arguments, or one per stdin line
- Optional channel lexicon and scorer policy from YAML
- JSON or text output, optional aggregate summary

============================================================
USAGE
============================================================
python -m chat_sentiment.cli "Amazing play GG" "not good"
cat chat.log | python -m chat_sentiment.cli --summary
python -m chat_sentiment.cli --lexicon channel.yaml --format text "so based"

============================================================
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from . import __version__
from .aggregate import summarize_results
from .config import ScorerConfig
from .display import sentiment_emoji
from .engine import SentimentEngine
from .exceptions import ChatSentimentError
from .lexicon import Lexicon


logger = logging.getLogger(__name__)


# ============================================================
# CLI ARGUMENT PARSER
# ============================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chat-sentiment",
        description="Lexicon-based sentiment for live chat messages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "Amazing play GG"              # Score one message
  %(prog)s --summary < chat.log           # Score stdin lines and summarize
  %(prog)s --lexicon channel.yaml "mid"   # Extend the lexicon
        """
    )

    parser.add_argument(
        "messages",
        nargs="*",
        metavar="MESSAGE",
        help="Messages to score (default: read one per line from stdin)",
    )

    # --------------------------------------------------------
    # Scoring Options
    # --------------------------------------------------------
    scoring_group = parser.add_argument_group("Scoring Options")

    scoring_group.add_argument(
        "--lexicon",
        type=str,
        metavar="PATH",
        help="YAML file with lexicon additions",
    )

    scoring_group.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="YAML file with scorer policy (default: environment)",
    )

    # --------------------------------------------------------
    # Output Options
    # --------------------------------------------------------
    output_group = parser.add_argument_group("Output Options")

    output_group.add_argument(
        "--format",
        type=str,
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )

    output_group.add_argument(
        "--summary",
        action="store_true",
        help="Print an aggregate summary after the per-message results",
    )

    # --------------------------------------------------------
    # Logging Options
    # --------------------------------------------------------
    logging_group = parser.add_argument_group("Logging Options")

    logging_group.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


# ============================================================
# ENGINE BUILDER
# ============================================================

def build_engine(args: argparse.Namespace) -> SentimentEngine:
    """
    Build a sentiment engine from CLI arguments.

    Raises:
        ChatSentimentError: On an invalid lexicon file or scorer policy
    """
    if args.config:
        config = ScorerConfig.from_yaml(Path(args.config), strict=True)
    else:
        config = ScorerConfig.from_env()

    lexicon = Lexicon.from_yaml(args.lexicon) if args.lexicon else Lexicon.default()

    return SentimentEngine(lexicon=lexicon, config=config)


def read_messages(args: argparse.Namespace, stdin: TextIO) -> List[str]:
    """Messages from arguments, or non-blank stdin lines."""
    if args.messages:
        return list(args.messages)
    return [line.rstrip("\n") for line in stdin if line.strip()]


# ============================================================
# OUTPUT
# ============================================================

def format_result(message: str, result, output_format: str) -> str:
    if output_format == "text":
        return (
            f"{sentiment_emoji(result)} {result.label.value:8s} "
            f"score={result.score:+.3f} magnitude={result.magnitude:.3f}  {message}"
        )
    return json.dumps({"message": message, **result.to_dict()}, ensure_ascii=False)


def format_summary(summary, output_format: str) -> str:
    if output_format == "text":
        return (
            f"\n{summary.total} messages: "
            f"{summary.positive_pct}% positive, "
            f"{summary.neutral_pct}% neutral, "
            f"{summary.negative_pct}% negative "
            f"(avg score {summary.average_score:+.3f})"
        )
    return json.dumps({"summary": summary.to_dict()})


# ============================================================
# MAIN ENTRY POINT
# ============================================================

def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        stdin: Input stream when no messages are given
        stdout: Output stream

    Returns:
        Exit code
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        engine = build_engine(args)
    except ChatSentimentError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    messages = read_messages(args, stdin)
    results = engine.batch_analyze(messages)

    for message, result in zip(messages, results):
        print(format_result(message, result, args.format), file=stdout)

    if args.summary:
        print(format_summary(summarize_results(results), args.format), file=stdout)

    logger.info(f"Scored {len(messages)} messages, cache stats: {engine.get_stats()['cache']}")
    return 0


# ============================================================
# MODULE EXECUTION
# ============================================================

if __name__ == "__main__":
    sys.exit(main())
