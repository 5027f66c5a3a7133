"""CLI entrypoint for domain-checker."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import Any

from .config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_NAMES_FILE,
    DEFAULT_OUTPUT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TLDS,
    DEFAULT_WORDS_FILE,
    ScanConfig,
)
from .credentials import default_provider, require_api_key
from .errors import ConfigError, CredentialError
from .logging_utils import configure_logging, get_logger, get_report_logger
from .pipeline import run_pipeline
from .validation import parse_length, parse_tlds
from .words import load_candidates, report_word_statistics

InputFn = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Domain Checker - cross a word list with TLDs and query Domainr availability."
    )
    parser.add_argument(
        "--names", action="store_true", help="Check the names list instead of the words list."
    )
    parser.add_argument(
        "--min-length", type=int, default=DEFAULT_MIN_LENGTH, help="Minimum word length."
    )
    parser.add_argument(
        "--max-length", type=int, default=DEFAULT_MAX_LENGTH, help="Maximum word length."
    )
    parser.add_argument(
        "--tlds",
        help="Custom TLDs separated by comma (e.g. '.com,.net'). "
        f"Default: {','.join(DEFAULT_TLDS)}.",
    )
    parser.add_argument("--words-file", default=DEFAULT_WORDS_FILE, help="Words list path.")
    parser.add_argument("--names-file", default=DEFAULT_NAMES_FILE, help="Names list path.")
    parser.add_argument(
        "--output", default=DEFAULT_OUTPUT, help="File that available domains are appended to."
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="HTTP timeout in seconds per check.",
    )
    parser.add_argument("--api-key", help="RapidAPI key (or set RAPIDAPI_KEY env var).")
    parser.add_argument("--secrets-file", help="JSON secrets file holding RapidApi.ApiKey.")
    parser.add_argument(
        "--interactive", action="store_true", help="Prompt for mode, lengths and TLDs."
    )
    parser.add_argument(
        "--yes", action="store_true", help="Start checking without waiting for Enter."
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bar.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI input."""
    return build_parser().parse_args(argv)


def _resolve_tlds(raw: str | None, logger: logging.Logger) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_TLDS
    tlds = parse_tlds(raw)
    if not tlds:
        logger.warning("No TLD in %r starts with '.'; no domains will be checked.", raw)
    return tlds


def _ambient_options(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "words_file": args.words_file,
        "names_file": args.names_file,
        "output": args.output,
        "request_timeout": args.timeout,
        "show_progress": not args.no_progress,
    }


def namespace_to_config(args: argparse.Namespace) -> ScanConfig:
    """Convert CLI args to validated ScanConfig."""
    return ScanConfig(
        tlds=_resolve_tlds(args.tlds, get_logger()),
        min_length=args.min_length,
        max_length=args.max_length,
        use_names=args.names,
        **_ambient_options(args),
    )


def _ask(input_fn: InputFn, prompt: str) -> str:
    try:
        return input_fn(prompt) or ""
    except EOFError:
        return ""


def prompt_config(input_fn: InputFn = input, **options: Any) -> ScanConfig:
    """Collect mode, lengths and TLDs interactively.

    Blank or unparsable lengths fall back to the defaults. Extra keyword
    options are passed through to ScanConfig.
    """
    logger = get_logger()
    use_names = _ask(input_fn, "Check names (N) or words (W)? ").strip().upper() == "N"
    min_length = parse_length(_ask(input_fn, "Minimum length (default 3): "), DEFAULT_MIN_LENGTH)
    max_length = parse_length(_ask(input_fn, "Maximum length (default 5): "), DEFAULT_MAX_LENGTH)

    tlds = DEFAULT_TLDS
    if _ask(input_fn, "Use custom TLDs? (Y/N): ").strip().upper() == "Y":
        raw = _ask(input_fn, "Enter TLDs separated by comma (e.g., .com,.net): ")
        tlds = _resolve_tlds(raw, logger)

    return ScanConfig(
        tlds=tlds,
        min_length=min_length,
        max_length=max_length,
        use_names=use_names,
        **options,
    )


def _wait_for_start(input_fn: InputFn) -> None:
    _ask(input_fn, "\nPress Enter to start checking domains...")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = get_logger()
    try:
        api_key = require_api_key(default_provider(args.api_key, args.secrets_file))
    except CredentialError as exc:
        logger.error("%s", exc)
        return 1

    report = get_report_logger()
    report.info("Domain Availability Checker (Free tier limited)")
    try:
        if args.interactive:
            config = prompt_config(input, **_ambient_options(args))
        else:
            config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    words = load_candidates(
        config.source_file, config.min_length, config.max_length, logger=logger
    )
    report_word_statistics(words, logger=report)

    if not args.yes:
        _wait_for_start(input)

    run_pipeline(config, words, api_key=api_key, logger=logger)
    report.info("Available domains appended to %s", config.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
