from __future__ import annotations

import argparse
from typing import List, Optional

from srcbundle.concat.concatenator import bundle
from srcbundle.errors import MissingManifestError, UsageError
from srcbundle.utils.config import BundleConfig

USAGE_MESSAGE = "Error: 2 arguments required: output file path and input file path."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srcbundle",
        description="Concatenate the files listed in a manifest into one output file",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="output file path, then manifest path")
    parser.add_argument("--config", action="append", default=[], help="YAML config (repeatable, merged in order)")
    parser.add_argument("--quiet", action="store_true", help="do not print progress lines")
    return parser


def parse_args(parser: argparse.ArgumentParser, argv: Optional[List[str]] = None) -> argparse.Namespace:
    args = parser.parse_intermixed_args(argv)
    if len(args.paths) != 2:
        raise UsageError(USAGE_MESSAGE)
    args.destination, args.manifest = args.paths
    return args


def load_config(args: argparse.Namespace) -> BundleConfig:
    cfg = BundleConfig.from_files(*args.config)
    if args.quiet:
        cfg.quiet = True
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parse_args(parser, argv)
    except UsageError as exc:
        print(exc)
        print(parser.format_usage().rstrip())
        return 0

    cfg = load_config(args)
    try:
        bundle(args.destination, args.manifest, config=cfg)
    except MissingManifestError as exc:
        print(f"Error: {exc}")
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
