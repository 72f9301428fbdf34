"""Print the LED-corrected value for a target color."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from collections.abc import Sequence

from ledcorrector.client import CorrectorClient, CorrectorClientError
from ledcorrector.const import DEFAULT_DEVICE, ENV_DEFAULT_DEVICE, ENV_SERVICE_URL
from ledcorrector.conversion import hex_to_rgb
from ledcorrector.correction import build_result
from ledcorrector.models import CorrectionResult, RGBColor
from ledcorrector.profiles import UnknownProfileError, list_profiles

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Correct a color for an RGB LED device")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--hex", dest="hex_value", help="Target color as #RRGGBB")
    target.add_argument(
        "--rgb",
        nargs=3,
        type=int,
        metavar=("R", "G", "B"),
        help="Target color as three 0-255 channels",
    )
    parser.add_argument(
        "--device",
        default=os.getenv(ENV_DEFAULT_DEVICE, DEFAULT_DEVICE),
        help="Device profile key",
    )
    parser.add_argument("--brightness", type=int, default=100)
    parser.add_argument("--service-url", default=os.getenv(ENV_SERVICE_URL))
    parser.add_argument("--timeout", type=float, default=float(os.getenv("HTTP_TIMEOUT", "1.5")))
    parser.add_argument("--list-profiles", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def _target_from_args(args: argparse.Namespace) -> RGBColor:
    if args.rgb is not None:
        return RGBColor.clamped(*args.rgb)
    if args.hex_value is None:
        raise SystemExit("A target color is required (--hex or --rgb)")
    parsed = hex_to_rgb(args.hex_value)
    if parsed is None:
        raise SystemExit(f"Invalid hex color: {args.hex_value}")
    return parsed


def format_result(result: CorrectionResult) -> list[str]:
    return [
        f"Target:    {result.target_hex} ({result.target_rgb_text})",
        f"Corrected: {result.corrected_hex} ({result.corrected_rgb_text})",
        f"Category:  {result.category}",
        f"Tip:       {result.tip}",
        result.software_hint,
    ]


async def _correct_remote(
    args: argparse.Namespace, target: RGBColor, brightness: int
) -> CorrectionResult:
    client = CorrectorClient(args.service_url, timeout=args.timeout)
    return await client.correct(rgb=target, device=args.device, brightness=brightness)


async def _run(argv: Sequence[str] | None = None) -> list[str]:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.list_profiles:
        return [
            f"{summary.key:<14} {summary.name} ({summary.software})"
            for summary in list_profiles()
        ]

    target = _target_from_args(args)
    brightness = max(0, args.brightness)
    try:
        if args.service_url:
            _LOGGER.debug("Requesting correction from %s", args.service_url)
            result = await _correct_remote(args, target, brightness)
        else:
            result = build_result(target, args.device, brightness)
    except (UnknownProfileError, CorrectorClientError) as exc:
        raise SystemExit(str(exc)) from exc
    return format_result(result)


def main(argv: Sequence[str] | None = None) -> None:
    for line in asyncio.run(_run(argv)):
        print(line)


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
