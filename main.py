"""CLI entrypoint for the word-search puzzle generator."""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.constants import DEFAULT_ATTEMPT_BUDGET, DEFAULT_GRID_SIZE
from wordsearch.data.normalization import parse_word_list, read_words_file
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.engine.validator import GridValidator
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import (format_answer_key, format_grid, format_word_list,
                                     print_puzzle_stats, shortfall_message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate printable word-search puzzles",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to hide (commas inside an argument also separate words)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with newline or comma separated words (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid size in cells per side (default {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_ATTEMPT_BUDGET,
        help="Random placement attempts per word before giving up",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--title", type=str, default="My Word Search", help="Puzzle title")
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Drop repeated words before generating",
    )
    parser.add_argument(
        "--show-answers",
        action="store_true",
        help="Also print the answer key (text format)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Append placement statistics to the text output",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[str]:
    words: List[str] = []
    if args.words:
        words.extend(parse_word_list("\n".join(args.words), unique=args.unique))
    if args.words_file:
        words.extend(read_words_file(args.words_file, unique=args.unique))
    if args.unique:
        words = list(dict.fromkeys(words))
    return words


def render_text(result, args: argparse.Namespace) -> str:
    lines = [args.title, "", format_grid(result.grid), "", "Find these words:", format_word_list(result)]
    if args.show_answers:
        lines.extend(["", "- ANSWER KEY -", format_answer_key(result)])
    if args.stats:
        stream = io.StringIO()
        print_puzzle_stats(result, stream=stream)
        lines.extend(["", stream.getvalue().rstrip()])
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if not args.words and not args.words_file:
        parser.error("provide --words and/or --words-file")
    if args.size <= 0:
        parser.error("--size must be positive")
    if args.attempts <= 0:
        parser.error("--attempts must be positive")

    words = collect_words(args)
    if not words:
        parser.error("no words with at least 2 letters were given")

    config = GeneratorConfig(size=args.size, attempt_budget=args.attempts, seed=args.seed)
    result = WordSearchGenerator(config).generate(words)
    validation = GridValidator(config.alphabet).validate(result)

    if args.format == "json":
        payload: Dict[str, Any] = {"title": args.title, **result.to_jsonable()}
        payload["validation"] = validation.messages
        output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    else:
        output_text = render_text(result, args)

    if args.output:
        args.output.write_text(output_text + "\n", encoding="utf-8")
    else:
        print(output_text)

    warning = shortfall_message(result)
    if warning:
        print(warning, file=sys.stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
