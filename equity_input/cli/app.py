"""
Command line entrypoint for equity inputs.

Usage:
    equity-input resolve '{"numPlayers": 3, "board": "As,Kd"}'
    equity-input resolve -f request.json
    equity-input --seed 7 deck --num-decks 2
    equity-input --config config/precise.yaml serve
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from equity_input.game.cards import build_deck
from equity_input.game.errors import ValidationError
from equity_input.game.inputs import parse_input
from equity_input.game.normalization import normalize_input
from equity_input.game.validation import validate_input
from equity_input.shared.config import Config
from equity_input.shared.config_loader import load_config, set_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="equity-input",
        description="Validate and normalize equity simulation inputs",
    )
    parser.add_argument("--config", type=Path, help="YAML file with config overrides")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for shuffling")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override system.log_level",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Validate an input and print it fully resolved")
    resolve.add_argument("input", nargs="?", help="Input as a JSON object")
    resolve.add_argument("--file", "-f", type=Path, help="Read the JSON input from a file")

    deck = commands.add_parser("deck", help="Print a shuffled card pool")
    deck.add_argument("--num-decks", type=int, default=1, help="Number of decks (default: 1)")

    commands.add_parser("serve", help="Run the HTTP API")

    return parser


def _load(args: argparse.Namespace) -> Config:
    overrides = {}
    if args.seed is not None:
        overrides["system__seed"] = args.seed
    if args.log_level is not None:
        overrides["system__log_level"] = args.log_level
    return load_config(args.config, **overrides)


def _read_input(args: argparse.Namespace) -> str:
    if args.file is not None:
        return args.file.read_text()
    if args.input is not None:
        return args.input
    return sys.stdin.read()


def run_resolve(args: argparse.Namespace, config: Config) -> int:
    try:
        data = json.loads(_read_input(args))
    except json.JSONDecodeError as e:
        print(f"Input is not valid JSON: {e}", file=sys.stderr)
        return 1

    try:
        raw = parse_input(data)
        validate_input(raw, config.defaults)
    except ValidationError as e:
        print(f"Invalid input ({e.field}): {e}", file=sys.stderr)
        return 1

    resolved = normalize_input(raw, config.defaults)
    print(json.dumps(resolved.to_dict(), indent=2))
    return 0


def run_deck(args: argparse.Namespace, config: Config) -> int:
    rng = np.random.default_rng(config.system.seed)
    try:
        deck = build_deck(args.num_decks, rng=rng)
    except ValidationError as e:
        print(f"Invalid input ({e.field}): {e}", file=sys.stderr)
        return 1
    print(",".join(repr(card) for card in deck))
    return 0


def run_serve(args: argparse.Namespace, config: Config) -> int:
    from equity_input.interfaces.api.app import serve

    serve(config)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    config = _load(args)

    logging.basicConfig(
        level=config.system.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    set_config(config)
    logger.debug(f"Running '{args.command}' with config {config.to_dict()}")

    handlers = {"resolve": run_resolve, "deck": run_deck, "serve": run_serve}
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
