"""
booking_platform.startup.__main__

Run only the startup sequence: `python -m booking_platform.startup`.

Useful as a deploy step (migrate + seed before rolling out app replicas).
Exit status is 0 on success and 1 on any StartupError.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from booking_platform.modules.registry import build_module_registry, module_names
from booking_platform.observability.logging import configure_logging, get_logger
from booking_platform.settings import Settings, get_settings
from booking_platform.startup.errors import StartupError
from booking_platform.startup.orchestrator import run_startup_sequence

log = get_logger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="python -m booking_platform.startup")
    parser.add_argument(
        "--env",
        choices=["dev", "test", "prod"],
        default=None,
        help="Override BOOKING_ENV for this run.",
    )
    parser.add_argument(
        "--module",
        dest="modules",
        action="append",
        choices=module_names(),
        help="Limit the run to this module (repeatable). Registry order is kept.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = _parse_args(argv)
    settings = settings or get_settings()
    if args.env is not None:
        settings = settings.model_copy(update={"env": args.env})

    configure_logging(settings)
    try:
        report = asyncio.run(
            run_startup_sequence(
                env=settings.env,
                modules=build_module_registry(settings, only=args.modules),
                step_timeout=settings.startup_step_timeout_seconds,
            )
        )
    except StartupError as e:
        log.error("startup_aborted", module=e.module, error=str(e))
        return 1

    log.info("startup_finished", skipped=report.skipped, modules=len(report.modules))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
