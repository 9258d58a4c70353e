"""CLI interface for decoding, encoding and sorting OCR payload tokens."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config import get_app_name, get_app_version, get_effective_bit_widths
from ..config.profile_loader import PayloadProfile
from ..config.profile_manager import set_profile
from ..models.ocr_box import OcrBox, sort_boxes
from ..pipeline.profile_codec import decode, encode

logger = logging.getLogger(__name__)


def _apply_overrides(profile: PayloadProfile, args: argparse.Namespace) -> PayloadProfile:
    """Return profile with environment, then command line, overrides applied."""
    data = profile.to_dict()
    data.update(get_effective_bit_widths(profile))
    for key in ("word_bits", "line_bits", "page_bits"):
        value = getattr(args, key, None)
        if value is not None:
            data[key] = value
    precision = getattr(args, "precision", None)
    if precision is not None:
        data["precision"] = precision
    return PayloadProfile.from_dict(data)


def _print_boxes(boxes: List[OcrBox], as_json: bool) -> None:
    if as_json:
        print(json.dumps([box.to_dict() for box in boxes], indent=2))
        return
    for box in boxes:
        print(box)


def _handle_decode(args: argparse.Namespace, profile: PayloadProfile) -> None:
    boxes = [decode(token, profile, apply_env=False) for token in args.tokens]
    _print_boxes(boxes, args.json)


def _handle_sort(args: argparse.Namespace, profile: PayloadProfile) -> None:
    boxes = sort_boxes(decode(token, profile, apply_env=False) for token in args.tokens)
    _print_boxes(boxes, args.json)


def _handle_encode(args: argparse.Namespace, profile: PayloadProfile) -> None:
    box = OcrBox(
        x=args.x,
        y=args.y,
        width=args.width,
        height=args.height,
        page_index=args.page,
        line_index=args.line,
        word_index=args.word
    )
    print(encode(box, profile, apply_env=False))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with decode, sort and encode commands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Configuration profile name (default: $OCR_PAYLOAD_PROFILE or 'default')"
    )
    common.add_argument("--word-bits", type=int, default=None, help="Override word index bit width")
    common.add_argument("--line-bits", type=int, default=None, help="Override line index bit width")
    common.add_argument("--page-bits", type=int, default=None, help="Override page index bit width")
    common.add_argument("--verbose", action="store_true", help="Enable verbose debug output")

    parser = argparse.ArgumentParser(
        description=f"{get_app_name()} - decode and encode OCR positional payloads"
    )
    parser.add_argument("--version", action="version", version=get_app_version())
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("decode", "Decode payload tokens"),
        ("sort", "Decode payload tokens and print them in reading order"),
    ):
        sub = subparsers.add_parser(name, parents=[common], help=help_text)
        sub.add_argument("tokens", nargs="+", help="Payload tokens, e.g. p27l50n13x131y527w879h053")
        sub.add_argument("--json", action="store_true", help="Print decoded boxes as JSON")

    encode_parser = subparsers.add_parser("encode", parents=[common], help="Encode a box as a payload token")
    encode_parser.add_argument("--x", type=float, required=True, help="Left edge (0-1)")
    encode_parser.add_argument("--y", type=float, required=True, help="Top edge (0-1)")
    encode_parser.add_argument("--width", type=float, required=True, help="Width (0-1)")
    encode_parser.add_argument("--height", type=float, required=True, help="Height (0-1)")
    encode_parser.add_argument("--page", type=int, default=None, help="Page index")
    encode_parser.add_argument("--line", type=int, default=None, help="Line index")
    encode_parser.add_argument("--word", type=int, default=None, help="Word index")
    encode_parser.add_argument("--precision", type=int, default=None, help="Fractional digits (1-9)")

    return parser


_HANDLERS = {
    "decode": _handle_decode,
    "sort": _handle_sort,
    "encode": _handle_encode,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s"
    )

    try:
        profile = _apply_overrides(set_profile(args.profile), args)
        _HANDLERS[args.command](args, profile)
    except (ValueError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
