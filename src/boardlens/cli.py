"""Command-line front end.

Usage:
    boardlens threats <fen>
    boardlens themes <fen> [--side w|b]
    boardlens variation <fen> <san>... [--side w|b] [--threshold T]
    boardlens review <pgn-file> [--threshold T]

``threats`` prints the text vulnerability report; the others print JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from boardlens.analysis import ThreatBoard, score_position
from boardlens.config import Settings
from boardlens.review import generate_game_review
from boardlens.variation import analyze_variation_themes, find_critical_moments


def _run(args: argparse.Namespace, settings: Settings):
    if args.command == "threats":
        return str(ThreatBoard(args.fen))

    if args.command == "themes":
        return asdict(score_position(args.fen, args.side))

    threshold = settings.critical_threshold if args.threshold is None else args.threshold

    if args.command == "variation":
        analysis = analyze_variation_themes(args.fen, args.moves, args.side)
        moments = find_critical_moments(args.fen, args.moves, args.side, threshold)
        return {
            "analysis": asdict(analysis),
            "critical_moments": [asdict(m) for m in moments],
        }

    with open(args.pgn_file) as f:
        pgn = f.read()
    return generate_game_review(pgn, threshold, settings=settings).to_dict()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boardlens",
        description="Static threat and positional theme analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    threats = sub.add_parser("threats", help="Hanging and semi-protected pieces")
    threats.add_argument("fen", help="FEN or piece placement (quote the full string)")

    themes = sub.add_parser("themes", help="Five-axis theme score for one side")
    themes.add_argument("fen", help="Full FEN (quote the full string)")
    themes.add_argument("--side", default="w", choices=["w", "b"])

    variation = sub.add_parser("variation", help="Theme changes along a line of SAN moves")
    variation.add_argument("fen", help="Starting FEN (quote the full string)")
    variation.add_argument("moves", nargs="*", help="SAN moves, in order")
    variation.add_argument("--side", default="w", choices=["w", "b"])
    variation.add_argument("--threshold", type=float, default=None,
                           help="Critical moment threshold (default from settings)")

    review = sub.add_parser("review", help="Full game review from a PGN file")
    review.add_argument("pgn_file", help="Path to a PGN file (first game is used)")
    review.add_argument("--threshold", type=float, default=None,
                        help="Critical moment threshold (default from settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        result = _run(args, settings)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        json.dump(result, sys.stdout, indent=2)
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
