"""``angle-report``: print every derived value of a single angle."""
from __future__ import annotations

import argparse
import json
import logging
import math
from typing import Dict, Union

from environs import Env

from .angle import Angle
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

ReportValue = Union[str, float]


def build_report(angle: Angle) -> Dict[str, ReportValue]:
    """Collect the textual form, both units and the trigonometric values."""
    return {
        "text": str(angle),
        "radians": angle.radians,
        "degrees": angle.degrees,
        "normalized": angle.normalize().degrees,
        "sin": angle.sin(),
        "cos": angle.cos(),
        "tan": angle.tan(),
        "haversine": angle.haversine(),
    }


def format_report(report: Dict[str, ReportValue]) -> str:
    width = max(len(key) for key in report)
    return "\n".join(f"{key:<{width}}: {value}" for key, value in report.items())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the derived values of a planar angle")
    parser.add_argument("value", type=float, help="Angle value")
    parser.add_argument("--unit", choices=("degrees", "radians"), default="degrees",
                        help="Unit of VALUE (default: degrees)")
    parser.add_argument("--normalize", action="store_true",
                        help="Reduce the angle to [0, 360) before reporting")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", default=None,
                        help="Override ANGLES_LOG_LEVEL (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args(argv)

    env = Env()
    env.read_env()
    try:
        setup_logging(env, args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("Building angle from %r %s", args.value, args.unit)
    if args.unit == "degrees":
        angle = Angle.from_degrees(args.value)
    else:
        angle = Angle.from_radians(args.value)
    if args.normalize:
        angle = angle.normalize()

    report = build_report(angle)
    non_finite = [key for key, value in report.items()
                  if isinstance(value, float) and not math.isfinite(value)]
    if non_finite:
        logger.info("Non-finite values in report: %s", ", ".join(non_finite))

    if args.json:
        print(json.dumps(report, ensure_ascii=False))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
