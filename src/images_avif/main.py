"""Main module for the images-avif CLI."""

import argparse
import json
import sys

from . import __version__
from .core import ImagesAvifError, get_logger
from .core.config import ConverterConfig
from .core.factories import RuntimeFactory
from .handler import handle_request

VERSION = __version__


def main() -> None:
    """
    Entry point for the command-line interface of the AVIF converter.

    ``convert`` runs one invocation locally against S3 with the same handler
    Lambda uses and prints the JSON result. ``version`` prints version
    information.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="images-avif",
        description="Convert a single S3 image to AVIF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert one object in place (writes photos/cat.avif)
  images-avif convert --bucket my-bucket --key photos/cat.jpg

  # Show version
  images-avif version
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    convert_parser: argparse.ArgumentParser = subparsers.add_parser(
        "convert", help="Convert one S3 object to AVIF"
    )
    convert_parser.add_argument("--bucket", required=True, help="S3 bucket")
    convert_parser.add_argument(
        "--key", required=True, help="S3 object key (may be URL-escaped)"
    )
    convert_parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    subparsers.add_parser("version", help="Show version information")

    args: argparse.Namespace = parser.parse_args()

    if args.command == "convert":
        logger = get_logger("images-avif.cli")
        try:
            config = ConverterConfig.from_env()
            if args.debug:
                config = config.model_copy(update={"log_level": "DEBUG"})
            runtime = RuntimeFactory.create_runtime(config)
            payload = handle_request({"s3Bucket": args.bucket, "s3Key": args.key}, runtime)
        except ImagesAvifError as e:
            logger.error(f"{type(e).__name__}: {e}")
            sys.exit(1)
        print(json.dumps(payload, indent=2))
        sys.exit(0)

    elif args.command == "version":
        print("Images AVIF CLI")
        print(f"Version {VERSION}")
        print("Single-object S3 image to AVIF converter")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
