#!/usr/bin/env python3
"""CLI for the rhythm demo: synthesize a trace and print its analysis.

Usage examples:
    python scripts/rhythm_cli.py normal --seed 42
    python scripts/rhythm_cli.py afib --seed 7 -o afib.json
    python scripts/rhythm_cli.py --all --config config/demo.yaml -v
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any

# Ensure project root on sys.path
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from config.settings import Settings
from src.ecg_system.exceptions import ConfigError, ECGSystemError
from src.ecg_system.session import RhythmSession
from src.interpretation.assembly import JSONAssembler
from src.simulator.patterns import RhythmPattern


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Synthesize an ECG rhythm and classify it.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "pattern", nargs="?", default="normal",
        help="Rhythm pattern: "
        + ", ".join(p.value for p in RhythmPattern)
        + " (or member name). Default normal.",
    )
    parser.add_argument("--all", action="store_true", help="Run every pattern in turn.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file.")
    parser.add_argument(
        "--include-samples", action="store_true",
        help="Embed the synthesized samples in the JSON output.",
    )
    parser.add_argument("-o", "--output", type=str, default=None, help="Write JSON here.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_yaml(args.config) if args.config else Settings.from_env()
    if args.seed is not None:
        settings.seed = args.seed
    # getLevelName maps known names to ints and anything else to "Level ..."
    if not isinstance(logging.getLevelName(str(settings.log_level).upper()), int):
        raise ConfigError(f"Unknown log level {settings.log_level!r}")
    return settings


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    try:
        settings = load_settings(args)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else str(settings.log_level).upper(),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )

        if args.all:
            patterns = list(RhythmPattern)
        else:
            patterns = [RhythmPattern.parse(args.pattern)]

        session = RhythmSession(settings)
        assembler = JSONAssembler()
        documents: list[dict[str, Any]] = []
        for pattern in patterns:
            snap = session.select(pattern)
            documents.append(assembler.assemble(
                snap.result,
                pattern=snap.pattern,
                samples=snap.samples,
                settings=settings,
                include_samples=args.include_samples,
            ))
    except ECGSystemError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output: Any = documents if args.all else documents[0]
    text = json.dumps(output, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, "w") as f:
            f.write(text + "\n")
        print(f"Wrote {len(documents)} result(s) to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
