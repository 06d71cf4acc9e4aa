"""
Command-line interface and high-level generator functions.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Sequence

from .builder import PasswordBuilder
from .config import GenerationConfig, QuantumSourceConfig, DEFAULT_CONFIG
from .errors import PasswordEngineError, RandomSourceError
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .strength import StrengthLabel, score

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    password: str
    strength: StrengthLabel
    config: GenerationConfig


def generate_password_with_meta(
    config: GenerationConfig | None = None,
    source: RandomSource | None = None,
) -> GenerationMeta:
    """
    Build one password with ``source`` (a fresh SystemRandomSource when
    omitted) and score it.
    """
    cfg = config or DEFAULT_CONFIG
    rng = source if source is not None else SystemRandomSource()

    password = PasswordBuilder(rng).generate(cfg).decode("ascii")
    return GenerationMeta(password=password, strength=score(password), config=cfg)


def generate_password(
    length: int = DEFAULT_CONFIG.length,
    allow_special: bool = DEFAULT_CONFIG.allow_special,
    source: RandomSource | None = None,
) -> str:
    """
    Return a password of exactly ``length`` ASCII characters.
    """
    config = GenerationConfig(length=length, allow_special=allow_special)
    return generate_password_with_meta(config, source).password


def assess_strength(password: str) -> str:
    """
    One of "Weak", "Medium", "Strong" or "Very Strong".
    """
    return score(password).text


def _build_source(args: argparse.Namespace) -> RandomSource:
    if args.seed is not None:
        return SeededRandomSource(args.seed)
    if args.source == "quantum":
        # qiskit is slow to import; only pay for it when asked.
        from .quantum_engine import QuantumRandomSource

        try:
            return QuantumRandomSource(QuantumSourceConfig(num_qubits=args.qubits))
        except ValueError as exc:
            raise RandomSourceError(f"quantum source unavailable: {exc}") from exc
    return SystemRandomSource()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate structured passwords and rate password strength.",
    )
    parser.add_argument(
        "-n", "--length", type=int, default=DEFAULT_CONFIG.length,
        help="password length (default: %(default)s)",
    )
    parser.add_argument(
        "--no-special", dest="allow_special", action="store_false",
        help="do not use special characters",
    )
    parser.add_argument(
        "-c", "--count", type=int, default=1,
        help="how many passwords to generate (default: %(default)s)",
    )
    parser.add_argument(
        "--source", choices=("system", "quantum"), default="system",
        help="random source (default: %(default)s)",
    )
    parser.add_argument(
        "--qubits", type=int, default=QuantumSourceConfig.num_qubits,
        help="qubits per circuit run for --source quantum",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="reproducible output from a seeded source (not for real use)",
    )
    parser.add_argument(
        "-s", "--strength", action="store_true",
        help="print the strength label next to each password",
    )
    parser.add_argument(
        "--check", metavar="PASSWORD", default=None,
        help="only rate PASSWORD and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `passgen`, `python -m passgen` or `run_passgen.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.check is not None:
        print(assess_strength(args.check))
        return 0

    if args.length < 0:
        parser.error("length must be non-negative")
    if args.count < 1:
        parser.error("count must be at least 1")
    if args.qubits < 1:
        parser.error("qubits must be at least 1")

    config = GenerationConfig(length=args.length, allow_special=args.allow_special)
    results: List[GenerationMeta] = []
    try:
        source = _build_source(args)
        logger.debug("using %r", source)
        for _ in range(args.count):
            results.append(generate_password_with_meta(config, source))
    except PasswordEngineError as exc:
        logger.error("password generation failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for meta in results:
        if args.strength:
            print(f"{meta.password}\t{meta.strength.text}")
        else:
            print(meta.password)
    return 0
