#!/usr/bin/env python3
"""CheetahType - typing speed test engine command line."""

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from engine.models import GenerationRequest, TestMode
from engine.practice_text import (
    FocusIntensity,
    character_frequency,
    character_practice_text,
    generate_practice_text,
)
from engine.result_store import ResultStore
from engine.scheduler import ThreadingScheduler
from engine.text_generator import generate_text
from engine.typing_test import TypingTest
from utils.config import Config
from utils.formatting import format_result, format_time, format_timestamp

log = logging.getLogger("cheetahtype")

PREVIEW_WORDS = 30


def setup_logging(verbose: bool = False) -> None:
    """Log to a rotating file in the XDG state directory and to stderr."""
    xdg_state_home = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state_home) / "cheetahtype"
    log_dir.mkdir(parents=True, exist_ok=True)

    # 5MB max, keep 5 backups
    file_handler = RotatingFileHandler(
        log_dir / "cheetahtype.log", maxBytes=5 * 1024 * 1024, backupCount=5
    )
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[file_handler, stream_handler],
    )


def data_directory() -> Path:
    """Directory holding the settings and results database."""
    xdg_data_home = os.environ.get("XDG_DATA_HOME", str(Path.home() / ".local" / "share"))
    data_dir = Path(xdg_data_home) / "cheetahtype"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def cmd_generate(args: argparse.Namespace) -> int:
    request = GenerationRequest(
        mode=args.mode, target_count=args.count, custom_text=args.custom_text
    )
    text = generate_text(request)
    if args.limit:
        text = " ".join(text.split(" ")[: args.limit])
    print(text)
    return 0


def cmd_practice(args: argparse.Namespace) -> int:
    if args.paragraph:
        text = character_practice_text(args.char, args.paragraph)
    else:
        text = generate_practice_text(
            args.char,
            difficulty_level=args.difficulty,
            word_count=args.count,
            focus_intensity=args.intensity,
        )
    print(text)
    print(f"\n'{args.char}' frequency: {character_frequency(text, args.char):.1%}")
    return 0


def cmd_run(args: argparse.Namespace, config: Config, store: ResultStore) -> int:
    session_config = config.session_config(
        mode=args.mode,
        time_limit_seconds=args.time,
        word_count=args.words,
        custom_text=args.custom_text,
    )
    test = TypingTest(
        session_config, scheduler=ThreadingScheduler(), on_result=store.save_result
    )

    words = test.text.split(" ")
    if session_config.mode == TestMode.WORDS:
        words = words[: session_config.word_count]
    else:
        words = words[:PREVIEW_WORDS]
    prompt = " ".join(words)

    limit = session_config.time_limit_seconds
    print(f"Mode: {session_config.mode.value}"
          + (f", time limit {format_time(limit)}" if limit else ""))
    print("Type the line below and press Enter:\n")
    print(prompt)

    test.tracker.start()
    try:
        typed = input()
    except (EOFError, KeyboardInterrupt):
        test.close()
        print("\nTest aborted.")
        return 1

    test.on_input(typed)
    result = test.finish()
    if result is None:
        print("No result recorded.")
        return 1

    print()
    print(format_result(result))
    if result.error_positions:
        print(f"Errors near word units: {result.error_positions}")
    return 0


def cmd_history(args: argparse.Namespace, config: Config, store: ResultStore) -> int:
    limit = args.limit or config.get("history_limit")
    results = store.get_recent_results(limit)
    if not results:
        print("No results stored yet.")
        return 0

    for stored in results:
        print(f"{format_timestamp(stored.timestamp_ms)}  "
              f"{stored.result.mode.value:<12} {format_result(stored.result)}")

    best = store.get_best_wpm()
    averages = store.get_average_stats()
    print(f"\nBest: {best} wpm | average over {averages.test_count} tests: "
          f"{averages.avg_wpm} wpm, {averages.avg_accuracy}% acc")
    return 0


def cmd_settings(args: argparse.Namespace, config: Config) -> int:
    if args.set:
        key, sep, value = args.set.partition("=")
        if not sep:
            print("Expected KEY=VALUE")
            return 1
        try:
            config.set(key.strip(), value.strip())
        except (KeyError, ValueError) as e:
            print(f"Cannot update setting: {e}")
            return 1

    for key, value in config.get_all().items():
        print(f"{key} = {value!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CheetahType typing test")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    modes = [mode.value for mode in TestMode]

    generate = subparsers.add_parser("generate", help="Print generated practice text")
    generate.add_argument("--mode", choices=modes, default=TestMode.TIME.value)
    generate.add_argument("--count", type=int, default=25, help="Requested word count")
    generate.add_argument("--custom-text", default=None, help="Text for custom mode")
    generate.add_argument("--limit", type=int, default=0,
                          help="Only print the first N words (0 = all)")

    practice = subparsers.add_parser("practice", help="Print practice text for a character")
    practice.add_argument("--char", required=True, help="Character to practice")
    practice.add_argument("--difficulty", type=int, default=1, choices=range(1, 6))
    practice.add_argument("--count", type=int, default=50, help="Number of words")
    practice.add_argument("--intensity", default=FocusIntensity.MEDIUM.value,
                          choices=[i.value for i in FocusIntensity])
    practice.add_argument("--paragraph", choices=["easy", "medium", "hard"], default=None,
                          help="Print the fixed paragraph for the character instead")

    run = subparsers.add_parser("run", help="Run a one line typing test")
    run.add_argument("--mode", choices=modes, default=None)
    run.add_argument("--time", type=int, default=None, help="Time limit in seconds")
    run.add_argument("--words", type=int, default=None, help="Words for words mode")
    run.add_argument("--custom-text", default=None, help="Text for custom mode")

    history = subparsers.add_parser("history", help="Show recent results")
    history.add_argument("--limit", type=int, default=0, help="Number of results")

    settings = subparsers.add_parser("settings", help="Show or change stored settings")
    settings.add_argument("--set", metavar="KEY=VALUE", default=None, help="Change one setting")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "generate":
        return cmd_generate(args)
    if args.command == "practice":
        return cmd_practice(args)

    db_path = data_directory() / "cheetahtype.db"
    config = Config(db_path)
    store = ResultStore(db_path)
    log.info(f"Database: {db_path}")

    if args.command == "run":
        return cmd_run(args, config, store)
    if args.command == "settings":
        return cmd_settings(args, config)
    return cmd_history(args, config, store)


if __name__ == "__main__":
    sys.exit(main())
