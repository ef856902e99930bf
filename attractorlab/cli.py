"""Command line for computing, classifying and exporting attractors."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from .attractor import RANDOM_TRIES, Attractor, AttractorType, attractor_types
from .vertex import Vertex


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attractorlab", description="Explore strange attractors."
    )
    parser.add_argument(
        "--type",
        dest="kind",
        choices=attractor_types(),
        default=AttractorType.ROSSLER.value,
        help="attractor system to use",
    )
    parser.add_argument(
        "--parameters", nargs="+", type=float, metavar="VALUE",
        help="parameter values of the system",
    )
    parser.add_argument(
        "--random", action="store_true",
        help="search for random parameters giving a chaotic attractor",
    )
    parser.add_argument(
        "--tries", type=int, default=RANDOM_TRIES,
        help="number of random parameter sets to try",
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument(
        "--count", type=int, default=10000, help="number of points to export"
    )
    parser.add_argument("-o", "--output", help="write the points to this OBJ file")
    parser.add_argument(
        "--list", action="store_true", help="list the attractor types and exit"
    )
    return parser


def _triple(v: Vertex) -> str:
    return f"{v.x:g}, {v.y:g}, {v.z:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in attractor_types():
            print(name)
        return 0

    if args.count < 0:
        parser.error("--count must not be negative")
    if args.tries < 1:
        parser.error("--tries must be at least 1")

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        attractor = Attractor(args.kind, args.parameters, rng=rng)
    except ValueError as exc:
        parser.error(str(exc))

    if args.random:
        attractor.random_tries = args.tries
        if not attractor.random():
            print(
                f"no chaotic attractor found after {args.tries} tries",
                file=sys.stderr,
            )
            return 1

    if args.output:
        try:
            attractor.export_obj(args.output, args.count)
        except OSError as exc:
            print(f"cannot write {args.output}: {exc}", file=sys.stderr)
            return 1

    model = attractor.model
    values = ", ".join(f"{model.value(i):g}" for i in range(len(model)))
    print(f"type: {attractor.kind.value}")
    print(f"parameters: {values}")
    print(f"center: {_triple(attractor.center)}")
    print(f"scale: {_triple(attractor.scale)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())