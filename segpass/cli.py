"""
Command-line interface.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_CONFIG, GeneratorConfig, PartsConfig
from .errors import PasswordGeneratorError, RandomSourceError
from .generator import GeneratedPassword, generate
from .random_source import RandomSource, SystemRandomSource
from .scoring import score_password, strength_label

logger = logging.getLogger(__name__)

# Interactive use gives up sooner than the library default.
CLI_MAX_ATTEMPTS = 10_000


def build_parser() -> argparse.ArgumentParser:
    defaults = DEFAULT_CONFIG
    parser = argparse.ArgumentParser(
        prog="segpass",
        description="Generate segmented passwords covering every enabled charset.",
    )
    parser.add_argument(
        "--length", type=int, default=defaults.parts.length,
        help="Characters per part (default: %(default)s)",
    )
    parser.add_argument(
        "--parts", type=int, default=defaults.parts.amount,
        help="Number of parts (default: %(default)s)",
    )
    parser.add_argument(
        "--delimiter", default=defaults.parts.delimiter,
        help="Separator between parts (default: %(default)r)",
    )
    parser.add_argument("--no-lowercase", action="store_true", help="Exclude a-z")
    parser.add_argument("--no-uppercase", action="store_true", help="Exclude A-Z")
    parser.add_argument("--no-numbers", action="store_true", help="Exclude 0-9")
    parser.add_argument(
        "--no-special", action="store_true", help="Exclude ASCII punctuation"
    )
    parser.add_argument(
        "--extended", action="store_true", help="Include Latin-1 characters"
    )
    parser.add_argument(
        "--count", type=int, default=1, help="How many passwords to print"
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument(
        "--quantum", action="store_true",
        help="Draw randomness from a simulated quantum circuit",
    )
    parser.add_argument(
        "--max-attempts", type=int, default=CLI_MAX_ATTEMPTS,
        help="Give up after this many candidates (default: %(default)s)",
    )
    parser.add_argument(
        "--score", metavar="PASSWORD",
        help="Score PASSWORD instead of generating one",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(
        lowercase=not args.no_lowercase,
        uppercase=not args.no_uppercase,
        numbers=not args.no_numbers,
        special=not args.no_special,
        extended=args.extended,
        parts=PartsConfig(
            amount=args.parts, length=args.length, delimiter=args.delimiter
        ),
    )


def _make_source(args: argparse.Namespace) -> RandomSource:
    if args.quantum:
        if args.seed is not None:
            logger.warning("--seed is ignored with --quantum")
        # Imported here: building the simulator is slow.
        try:
            from .quantum_engine import QuantumRandomSource
        except ImportError as e:
            raise RandomSourceError(
                f"--quantum needs qiskit and qiskit-aer installed ({e})"
            ) from e

        return QuantumRandomSource()
    return SystemRandomSource(args.seed)


def describe(password: GeneratedPassword) -> dict:
    score = score_password(password.value)
    return {
        "password": password.value,
        "charset_length": password.charset_length,
        "entropy_bits": round(password.entropy_bits, 2),
        "score": score,
        "strength": strength_label(score),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for `segpass`, `python -m segpass` or `run_segpass.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.score is not None:
        score = score_password(args.score)
        if args.json:
            print(json.dumps({"score": score, "strength": strength_label(score)}))
        else:
            print(f"Score: {score} ({strength_label(score)})")
        return 0

    if args.count < 1:
        print("Error: --count must be at least 1", file=sys.stderr)
        return 1

    try:
        config = config_from_args(args)
        source = _make_source(args)
        results = [
            describe(generate(config, source, args.max_attempts))
            for _ in range(args.count)
        ]
    except (PasswordGeneratorError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        for item in results:
            print(
                f"{item['password']}  score={item['score']} ({item['strength']}), "
                f"~{item['entropy_bits']:.1f} bits"
            )
    return 0
