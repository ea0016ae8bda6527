"""Command line tool: print diverging colormap definitions.

Examples:
    divergent                                   # all built-in presets as pgfplots
    divergent coolwarm --samples 65
    divergent --low 0.2 0.3 0.9 --high 0.9 0.2 0.1 --name mine --format json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from divergent import __version__, defaults
from divergent.diverging import Diverging
from divergent.errors import DivergentError
from divergent.export import to_json, to_pgfplots
from divergent.presets import BUILTIN_PRESETS, get_preset, list_presets

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="divergent",
        description="Generate diverging colormaps interpolated in MSH space.",
    )
    parser.add_argument(
        "presets", nargs="*", metavar="PRESET",
        help=f"Preset names to print (default: all of {', '.join(list_presets())})",
    )
    parser.add_argument("--low", nargs=3, type=float, metavar=("R", "G", "B"),
                        help="Low endpoint color for a custom colormap")
    parser.add_argument("--high", nargs=3, type=float, metavar=("R", "G", "B"),
                        help="High endpoint color for a custom colormap")
    parser.add_argument("--name", default="custom", help="Name of the custom colormap")
    parser.add_argument("--min", dest="vmin", type=float, default=0.0, help="Data minimum")
    parser.add_argument("--max", dest="vmax", type=float, default=1.0, help="Data maximum")
    parser.add_argument("--midpoint", type=float, default=None,
                        help="Data value at the neutral center (default: (min + max) / 2)")
    parser.add_argument("--samples", type=int, default=defaults.DEFAULT_SAMPLES,
                        help="Number of evenly spaced samples per colormap")
    parser.add_argument("--format", choices=("pgfplots", "json"), default="pgfplots")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write to this file instead of stdout")
    parser.add_argument("--list", action="store_true", help="List presets and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _colormaps(args: argparse.Namespace) -> list[tuple[str, Diverging]]:
    if (args.low is None) != (args.high is None):
        raise DivergentError("--low and --high must be given together")

    cmaps = []
    if args.low is not None:
        cmaps.append((
            args.name,
            Diverging.from_rgb(args.low, args.high, args.vmin, args.vmax, args.midpoint),
        ))

    names = args.presets
    if not names and not cmaps:
        names = list_presets()
    for name in names:
        preset = get_preset(name)
        cmaps.append((preset.name, preset.build(args.vmin, args.vmax, args.midpoint)))
    return cmaps


def render(args: argparse.Namespace) -> str:
    cmaps = _colormaps(args)
    if args.format == "json":
        docs = [to_json(name, cmap, args.samples) for name, cmap in cmaps]
        return json.dumps(docs if len(docs) > 1 else docs[0], indent=2) + "\n"
    return "".join(to_pgfplots(name, cmap, args.samples) for name, cmap in cmaps)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name, preset in BUILTIN_PRESETS.items():
            print(f"{name:12s} {preset.description}")
        return 0

    try:
        text = render(args)
    except DivergentError as e:
        print(f"divergent: error: {e}", file=sys.stderr)
        return 1

    if args.output is not None:
        args.output.write_text(text)
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
