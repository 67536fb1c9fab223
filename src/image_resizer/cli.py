"""Command line entry point: ``image-resizer -i INPUT -o OUTPUT -d WxH``."""

import argparse
import sys
import time
from collections.abc import Sequence

from loguru import logger

from .algo.image_resize import image_resize
from .errors import ImageResizerError, MissingFlagError
from .schema import Dimensions, ResizeParams
from .utils.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-resizer",
        description="Resize a JPEG or PNG image with nearest-neighbor sampling and save it as PNG.",
    )
    parser.add_argument("-i", dest="input", default="", help="input path")
    parser.add_argument("-o", dest="output", default="", help="output path")
    parser.add_argument("-d", dest="dimensions", default="", help="dimensions, e.g. 640x480")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log progress and stage timings to stderr",
    )
    return parser


def parse_params(args: argparse.Namespace) -> ResizeParams:
    """Validate parsed flags into ResizeParams without touching any file.

    Raises:
        MissingFlagError: If -o, -i or -d is missing or empty (checked in that order)
        InvalidDimensionsError: If -d is malformed
    """
    if not args.output:
        raise MissingFlagError(
            "no output path provided\n"
            + "please give a output path by giving this command the -o flag with the destination"
        )
    if not args.input:
        raise MissingFlagError(
            "no input path provided\n"
            + "please give a input path by giving this command the -i flag with the destination"
        )
    if not args.dimensions:
        raise MissingFlagError(
            "no dimensions provided\n"
            + "please provide the wished for dimensions by passing this command the -d flag"
        )

    return ResizeParams(
        input_path=args.input,
        output_path=args.output,
        dimensions=Dimensions.parse(args.dimensions),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run one resize and return the process exit status."""
    start = time.perf_counter()
    args = build_parser().parse_args(argv)
    _ = configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        params = parse_params(args)
        logger.info(
            f"Resizing {params.input_path} to {params.dimensions} -> {params.output_path}"
        )
        _ = image_resize(
            input_path=params.input_path,
            output_path=params.output_path,
            dimensions=params.dimensions,
        )
    except (ImageResizerError, OSError) as exc:
        logger.debug(f"Resize failed: {type(exc).__name__}")
        print(exc, file=sys.stderr)
        return 1
    except MemoryError:
        print(
            f"not enough memory to resize to {args.dimensions}",
            file=sys.stderr,
        )
        return 1

    elapsed = time.perf_counter() - start
    print(f"done resizing image in {elapsed:.3f}s ✨✨✨")
    return 0
