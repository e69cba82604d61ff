"""
Parallel Image Processing
Grayscale, invert, brightness, Gaussian blur and nearest-neighbor resize
"""

import argparse
import logging
import sys
from typing import List, Optional

DEFAULT_OUTPUT = "outputs/result.jpg"


def build_argparser() -> argparse.ArgumentParser:
    from utils.test_images import DEMO_IMAGES

    p = argparse.ArgumentParser(
        description="Apply parallel pixel transforms to an image.",
        epilog="Commands: grayscale, invert, brightness=N, blur, resize=WxH "
               "(applied left to right).",
    )
    p.add_argument("input", nargs="?", help="Image to load (.png/.jpg/...)")
    p.add_argument("commands", nargs="*", help="Transform commands")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help=f"Output path (default: {DEFAULT_OUTPUT})")
    p.add_argument("--synthetic", choices=DEMO_IMAGES, help="Use a generated image instead of INPUT")
    p.add_argument("--size", type=int, default=512, help="Synthetic image size")
    p.add_argument("--channels", type=int, choices=(1, 3, 4), default=3, help="Synthetic image channels")
    p.add_argument("--workers", type=int, default=None, help="Worker threads (default: CPU count)")
    p.add_argument("--quality", type=int, default=100, help="JPEG quality for the output (0-100)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Load, transform and save; returns the process exit status."""
    from models import EngineConfig, TransformError, parse_command
    from engines import WorkerPool, run_pipeline
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_demo_image
    from utils.logging import configure_engine_logging, get_logger

    parser = build_argparser()
    args = parser.parse_args(argv)
    configure_engine_logging(logging.DEBUG if args.verbose else logging.INFO)
    logger = get_logger()

    # With --synthetic there is no input path, so the first positional is a command
    raw_commands = list(args.commands)
    if args.synthetic and args.input:
        raw_commands.insert(0, args.input)
    elif not args.synthetic and not args.input:
        parser.print_usage(sys.stderr)
        logger.error("Provide an input image or --synthetic")
        return 2

    try:
        commands = [parse_command(text) for text in raw_commands]
        config = EngineConfig(num_workers=args.workers)
        if not (0 <= args.quality <= 100):
            raise ValueError(f"Quality must be 0-100, got {args.quality}")
    except ValueError as e:
        logger.error("%s", e)
        return 2

    try:
        if args.synthetic:
            logger.info("Generating %s image (%dx%d)", args.synthetic, args.size, args.size)
            buffer = generate_demo_image(args.synthetic, args.size, channels=args.channels)
        else:
            buffer = load_image(args.input)
        logger.info("Loaded: %dx%d - %d channels", buffer.width, buffer.height, buffer.channels)

        with WorkerPool(config) as pool:
            result = run_pipeline(buffer, commands, pool=pool)

        save_image(result.buffer, args.output, quality=args.quality)
    except (TransformError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "Saved %dx%d image to %s (%d steps, %.2f ms)",
        result.buffer.width, result.buffer.height, args.output,
        len(result.timings), result.total_ms,
    )
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
