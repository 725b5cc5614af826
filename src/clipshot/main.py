#!/usr/bin/env python3

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from clipshot.config import Settings
from clipshot.models.captured_image import CapturedImage
from clipshot.services.capture_service import ImageCaptureService

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clipshot",
        description="Get an image from the clipboard or an interactive screenshot")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    clipboard = subparsers.add_parser(
        "clipboard", help="Print the path of the clipboard image")
    clipboard.add_argument("--json", action="store_true",
                           help="Print the capture record as JSON")

    screenshot = subparsers.add_parser(
        "screenshot", help="Select a screen region and print the saved path")
    screenshot.add_argument("--json", action="store_true",
                            help="Print the capture record as JSON")

    cleanup = subparsers.add_parser(
        "cleanup", help="Remove temp images created by clipshot")
    cleanup.add_argument("paths", nargs="+", metavar="PATH")

    return parser


def _print_image(image: CapturedImage, as_json: bool) -> None:
    if as_json:
        print(image.model_dump_json())
    else:
        print(image.path)


async def _run(args: argparse.Namespace, service: ImageCaptureService) -> int:
    if args.command == "clipboard":
        image = await service.resolve_clipboard_image()
        if image is None:
            logger.info("No image found on the clipboard")
            return 1
        _print_image(image, args.json)
        return 0

    if args.command == "screenshot":
        try:
            image = await service.capture_screenshot_image()
        except OSError as e:
            logger.error(f"Could not start screencapture: {e}")
            return 2
        _print_image(image, args.json)
        return 0

    refused = [path for path in args.paths if not service.cleanup(path)]
    for path in refused:
        logger.warning(f"Not removed: {path}")
    return 1 if refused else 0


def main(argv: Optional[List[str]] = None, service: Optional[ImageCaptureService] = None) -> int:
    args = _build_parser().parse_args(argv)

    if service is None:
        service = ImageCaptureService(settings=Settings.from_env())

    level = logging.DEBUG if args.verbose else service.settings.log_level
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    return asyncio.run(_run(args, service))


if __name__ == "__main__":
    sys.exit(main())
