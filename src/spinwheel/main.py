"""
Command-line entry point for SPINWHEEL.

Runs the engine headless and prints JSON, which is handy for checking a
wheel's layout or replaying a seeded spin without a renderer.

Items are given as ``LABEL`` or ``LABEL=EMOJI``.
"""

import argparse
import json
import logging
import random
import sys
from typing import Sequence

from spinwheel.config.settings import get_settings
from spinwheel.config.themes import get_theme, list_themes
from spinwheel.core.models import Slice, WheelState
from spinwheel.engine import WheelEngine


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_items(items: Sequence[str]) -> list[Slice]:
    """Turn ``LABEL[=EMOJI]`` arguments into slices with stable ids."""
    slices = []
    for i, raw in enumerate(items):
        label, _, emoji = raw.partition("=")
        slices.append(Slice(id=f"item-{i}", label=label.strip(), has_emoji=bool(emoji), emoji=emoji.strip()))
    return slices


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spinwheel", description="Wheel-of-fortune engine")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--theme", default=None, help=f"Palette theme ({', '.join(list_themes())})")

    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", help="Print the layout of a wheel")
    layout.add_argument("items", nargs="*", help="LABEL or LABEL=EMOJI")

    colors = sub.add_parser("colors", help="Assign colors to a wheel of N slices")
    colors.add_argument("count", type=int)

    spin = sub.add_parser("spin", help="Plan a spin and report the winner")
    spin.add_argument("items", nargs="+", help="LABEL or LABEL=EMOJI")
    spin.add_argument("--seed", type=int, default=None, help="Seed for a reproducible spin")
    spin.add_argument("--rotation", type=float, default=0.0, help="Current wheel rotation in degrees")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(args.debug or settings.debug)
    logger = logging.getLogger(__name__)

    palette = get_theme(args.theme).palette if args.theme else None
    rng = random.Random(args.seed) if getattr(args, "seed", None) is not None else None
    engine = WheelEngine(settings=settings, palette=palette, rng=rng)

    if args.command == "layout":
        slices = engine.colorize(parse_items(args.items))
        output = [entry.to_dict() for entry in engine.layout(slices)]

    elif args.command == "colors":
        output = engine.assign_colors([str(i) for i in range(max(0, args.count))])

    else:
        slices = parse_items(args.items)
        plan = engine.spin(WheelState(rotation_deg=args.rotation, slice_count=len(slices)))
        if plan is None:
            logger.error("A wheel needs at least 2 items to spin")
            return 1
        winner = engine.resolve(plan, plan.duration_ms)
        output = {
            "plan": plan.to_dict(),
            "winner": {"index": winner, "id": slices[winner].id, "label": slices[winner].label},
        }

    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
