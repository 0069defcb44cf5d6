# src/motley_hue/cli.py
import argparse
import json
import logging
import sys

from . import api
from .errors import MotleyHueError
from .models import Direction, Model

OPERATIONS = (
    "analagous",
    "complimentary",
    "contrast",
    "even",
    "gradient",
    "monochromatic",
    "tetradic",
    "triadic",
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motley-hue",
        description="Compute color-wheel combinations for a hex color or color name.",
    )
    parser.add_argument("operation", choices=OPERATIONS, help="Combination to compute")
    parser.add_argument("color", help="Base color (e.g. FF0000, '#f00', red)")
    parser.add_argument(
        "color2",
        nargs="?",
        help="End color (gradient only)",
    )
    parser.add_argument("--count", type=int, default=None, help="Number of colors")
    parser.add_argument(
        "--direction",
        choices=[d.value for d in Direction],
        default=Direction.CLOCKWISE.value,
        help="Wheel direction (analagous only)",
    )
    parser.add_argument(
        "--model",
        choices=[m.value for m in Model],
        default=Model.HSV.value,
        help="Complement model (complimentary only)",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON array")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def _run(args: argparse.Namespace) -> list:
    op = args.operation
    if op == "analagous":
        return api.analagous(args.color, args.direction)
    if op == "complimentary":
        return api.complimentary(args.color, args.model)
    if op == "gradient":
        if args.color2 is None:
            raise SystemExit("motley-hue: gradient needs two colors")
        return api.gradient(args.color, args.color2, 3 if args.count is None else args.count)
    if op == "monochromatic":
        return api.monochromatic(args.color, 3 if args.count is None else args.count)
    if op in ("contrast", "even"):
        if args.count is None:
            raise SystemExit(f"motley-hue: {op} needs --count")
        return getattr(api, op)(args.color, args.count)
    return getattr(api, op)(args.color)


def main(argv: list[str] | None = None) -> int:
    """CLI: print a color combination, one color per line (or JSON)."""
    args = _build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        colors = _run(args)
    except MotleyHueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(colors))
    else:
        print("\n".join(colors))
    return 0


if __name__ == "__main__":
    sys.exit(main())
