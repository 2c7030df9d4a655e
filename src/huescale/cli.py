from __future__ import annotations

"""Command line entry point: ``huescale``.

Examples::

    huescale "#2D72D2" --stop 500
    huescale --batch "#2D72D2::500, #5C7CFA::400" --format oklch
    huescale --transform "#2D72D2>#238551::500" --json out/green.json
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from common import settings, setup_default_logging

from .api import BatchResult, GeneratedPaletteOutput, generate_batch, generate_palette, transform
from .color_types import DEFAULT_REFERENCE_STOP, coerce_stop
from .errors import HuescaleError, describe_error
from .exporter import Exporter, JsonFileExporter
from .formatter import ColorFormat, format_color
from .inputs import parse_pairs, parse_transformation
from .loader import load_pattern
from .pattern import TransformationPattern

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huescale", description="Generate 10-stop OKLCH color palettes.")
    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument("color", nargs="?", help="input color (hex, rgb(), hsl(), oklch(), oklab() or a CSS name)")
    mode.add_argument("--batch", metavar="PAIRS", help='comma/newline separated "color::stop" pairs')
    mode.add_argument("--transform", metavar="EXPR", help='"ref>target[::stop]" or "ref>(t1,t2)[::stop]"')
    p.add_argument("--stop", default=None, help=f"anchor stop for COLOR (default {DEFAULT_REFERENCE_STOP})")
    p.add_argument("--format", dest="fmt", choices=[f.value for f in ColorFormat], default=None)
    p.add_argument("--name", default=None, help="palette name (batch: group name)")
    p.add_argument("--pattern", default=None, help="palette JSON used as the pattern source")
    p.add_argument("--json", dest="json_path", default=None, help="also write the result as JSON")
    p.add_argument("--preview", dest="preview_path", default=None, help="also render a PNG swatch strip")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p


def main(argv: Optional[Sequence[str]] = None, exporter: Optional[Exporter] = None) -> int:
    """Run the CLI; ``exporter`` replaces the ``--json`` file destination when given."""
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    status = 0
    try:
        pattern = load_pattern(args.pattern)
        exported: Optional[GeneratedPaletteOutput | BatchResult] = None
        if args.batch is not None:
            exported = _run_batch(args, pattern)
            palettes = list(exported.palettes)
            if exported.failures and not palettes:
                status = 1
        elif args.transform is not None:
            palettes = _run_transform(args, pattern)
            if len(palettes) == 1:
                exported = palettes[0]
            elif palettes:
                exported = BatchResult(
                    group_name=args.name or settings.get().DEFAULT_BATCH_NAME,
                    output_format=palettes[0].output_format,
                    generated_at=datetime.now(timezone.utc).isoformat(),
                    palettes=tuple(palettes),
                    partial=False,
                )
        else:
            stop = coerce_stop(args.stop) if args.stop is not None else DEFAULT_REFERENCE_STOP
            exported = generate_palette(args.color, stop, pattern, args.fmt, args.name)
            _print_palette(exported)
            palettes = [exported]

        if exporter is None and args.json_path:
            exporter = JsonFileExporter(args.json_path)
        if exporter is not None:
            if exported is None:
                logger.warning("nothing to export; give a stop to generate palettes")
            else:
                exporter.export(exported)
        if args.preview_path and palettes:
            from .preview import render_swatches

            render_swatches(palettes, args.preview_path)
    except HuescaleError as exc:
        print(f"error: {describe_error(exc)}", file=sys.stderr)
        return 1
    return status


def _run_batch(args: argparse.Namespace, pattern: TransformationPattern) -> BatchResult:
    pairs = [(p.color, p.stop if p.stop is not None else DEFAULT_REFERENCE_STOP) for p in parse_pairs(args.batch)]
    result = generate_batch(pairs, pattern, args.fmt, args.name)
    for palette in result.palettes:
        _print_palette(palette)
    for failure in result.failures:
        print(f"error: [{failure.index}] {failure.input_color}: {failure.reason}", file=sys.stderr)
    return result


def _run_transform(args: argparse.Namespace, pattern: TransformationPattern) -> List[GeneratedPaletteOutput]:
    """Print transformed colors; with a stop, also build a palette per target."""
    request = parse_transformation(args.transform)
    fmt = ColorFormat.from_value(args.fmt or settings.get().DEFAULT_OUTPUT_FORMAT)
    palettes: List[GeneratedPaletteOutput] = []
    for target in request.targets:
        color = transform(request.reference, target)
        print(f"{target} -> {format_color(color, fmt)}")
        if request.stop is None:
            continue
        name = f"{args.name or settings.get().DEFAULT_PALETTE_NAME}-{target}"
        palette = generate_palette(format_color(color, ColorFormat.OKLCH), request.stop, pattern, fmt, name)
        _print_palette(palette)
        palettes.append(palette)
    return palettes


def _print_palette(palette: GeneratedPaletteOutput) -> None:
    print(f"{palette.name} (anchor {palette.anchor_stop}: {palette.input_color})")
    for stop in palette.stops:
        print(f"  {stop.position:>4}  {stop.value}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
