import argparse
import base64
import logging
import sys
from pathlib import Path
from typing import Optional

from cloud_relay.core.config import settings
from cloud_relay.models.errors import RelayError
from cloud_relay.services.image_service import OpenAIImageService
from cloud_relay.services.ocr_service import TextractOCRService
from cloud_relay.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def run_ocr(file_path: str, ocr_service: Optional[TextractOCRService] = None) -> int:
    path = Path(file_path)
    if not path.is_file():
        logger.error(f"File not found or not a regular file: {file_path}")
        return 1

    file_size_mb = path.stat().st_size / (1024 * 1024)
    if file_size_mb > settings.max_body_size_mb:
        logger.error(f"File size ({file_size_mb:.2f}MB) exceeds maximum limit of {settings.max_body_size_mb}MB")
        return 1

    image_base64 = base64.b64encode(path.read_bytes()).decode("utf-8")
    ocr_service = ocr_service or TextractOCRService()

    try:
        text = ocr_service.extract_text(image_base64)
    except RelayError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(text)
    return 0


def run_generate(prompt: str, image_service: Optional[OpenAIImageService] = None) -> int:
    image_service = image_service or OpenAIImageService()

    try:
        image_url = image_service.generate_image(prompt)
    except RelayError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(image_url)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloud-relay",
        description="Cloud Relay CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cloud-relay ocr --file receipt.png
  cloud-relay generate --prompt "a cat wearing a hat"
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    ocr_parser = subparsers.add_parser("ocr", help="Extract text from a local image with AWS Textract")
    ocr_parser.add_argument("--file", required=True, help="Path to the local image file")

    generate_parser = subparsers.add_parser("generate", help="Generate an image with OpenAI")
    generate_parser.add_argument("--prompt", required=True, help="Text description of the image")

    return parser


def main(argv=None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "ocr":
        return run_ocr(args.file)
    if args.command == "generate":
        return run_generate(args.prompt)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
