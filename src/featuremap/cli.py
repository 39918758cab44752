import argparse
import logging
import os
import sys

from .errors import FeatureMapError
from .glyphs import GlyphKind
from .panel import Panel
from .styles import COLOURS, DEFAULT_PANEL_WIDTH


def parse_point(value: str):
    """NAME:POS -> (name, pos)"""
    name, sep, pos = value.rpartition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME:POS, got {value!r}")
    try:
        return name, int(pos.replace(",", ""))
    except ValueError:
        raise argparse.ArgumentTypeError(f"position is not an integer: {value!r}") from None


def add_draw_args(parser):
    parser.add_argument("--out", required=True, help="Output image path (.png)")
    parser.add_argument("--bed", nargs='+', action='extend', default=[], help="BED file(s), one track each")
    parser.add_argument("--gff", nargs='+', action='extend', default=[], help="GFF3/GTF file(s), one track each")
    parser.add_argument("--point", type=parse_point, nargs='+', action='extend', default=[],
                        help="Point feature(s) as NAME:POS, drawn as triangles in a 'points' track")
    parser.add_argument("--chrom", help="Only use features on this chromosome")
    parser.add_argument("--length", type=int, help="Length of the map, [largest feature end]")
    parser.add_argument("--width", type=int, default=DEFAULT_PANEL_WIDTH, help=f"Image width (pixels), [{DEFAULT_PANEL_WIDTH}]")
    parser.add_argument("--start", type=int, help="First coordinate to display, [0]")
    parser.add_argument("--stop", type=int, help="Last coordinate to display, [length]")
    parser.add_argument("--glyph", choices=[k.value for k in GlyphKind], default=GlyphKind.DIRECTED_SPLICED.value,
                        help=f"Glyph for BED/GFF tracks, [{GlyphKind.DIRECTED_SPLICED.value}]")
    parser.add_argument("--colour", choices=sorted(COLOURS), default="blue", help="Feature colour, [blue]")
    parser.add_argument("--no-labels", dest="labels", action="store_false", help="Hide feature labels")
    parser.add_argument("--clickable", action="store_true", help="Also write an HTML page with a clickable image map")


def collect_tracks(args):
    """Read every input file; returns [(title, glyph, colour, [Feature, ...]), ...]"""
    tracks = []
    for path in args.bed:
        from .bed import parse_bed
        features = [b.to_feature() for b in parse_bed(path, args.chrom)]
        tracks.append((_title(path), args.glyph, args.colour, features))
    for path in args.gff:
        from .gff import parse_gff
        features = [g.to_feature() for g in parse_gff(path, args.chrom)]
        tracks.append((_title(path), args.glyph, args.colour, features))
    if args.point:
        from .feature import Feature
        features = [Feature(name, pos, pos) for name, pos in args.point]
        tracks.append(("points", GlyphKind.TRIANGLE.value, "red", features))
    return tracks


def _title(path):
    return os.path.splitext(os.path.basename(path))[0]


def draw(args):
    missing = [p for p in args.bed + args.gff if not os.path.exists(p)]
    if missing:
        print("Error: input file(s) not found:", file=sys.stderr)
        for path in missing:
            print(f"  - {path}", file=sys.stderr)
        sys.exit(1)

    tracks = collect_tracks(args)
    if not tracks:
        print("Error: nothing to draw; give --bed, --gff or --point", file=sys.stderr)
        sys.exit(1)

    length = args.length
    if length is None:
        length = max((f.stop for _, _, _, features in tracks for f in features), default=0)
        if length <= 0:
            print("Error: no features found; set --length to draw an empty map", file=sys.stderr)
            sys.exit(1)

    try:
        panel = Panel(length, args.width, args.clickable, args.start, args.stop)
        for title, glyph, colour, features in tracks:
            track = panel.add_track(title, args.labels, colour, glyph)
            track.features.extend(features)
        composition = panel.draw(args.out)
    except FeatureMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Wrote {args.out} ({panel.width}x{composition.height}, {composition.track_count} tracks, "
          f"{composition.feature_rows} feature rows)")


def main():
    p = argparse.ArgumentParser(description="featuremap: draw features on a linear map")
    p.add_argument("-v", "--verbose", action="store_true", help="Log layout decisions")
    sub = p.add_subparsers(dest="cmd")

    draw_parser = sub.add_parser("draw", help="Draw BED/GFF features and point markers to an image")
    add_draw_args(draw_parser)

    args = p.parse_args()
    if args.cmd is None:
        p.print_help()
        return

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.cmd == "draw":
        draw(args)


if __name__ == "__main__":
    main()
