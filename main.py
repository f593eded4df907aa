"""Command line entry point for the voice page stub.

Mirrors ``python -m playwright`` closely enough for CI: ``install`` is
acknowledged without downloading anything.
"""

from __future__ import annotations

import sys
from typing import Iterable

from infra.config import load_dotenv, load_settings
from infra.errors import ConfigError
from infra.logging import get_logger


def run_startup_health_checks() -> tuple[bool, dict[str, bool]]:
    """Run lightweight startup checks for configuration and logging."""
    checks = {"config_loadable": False, "logger_writable": False}
    try:
        load_dotenv()
        settings = load_settings()
        checks["config_loadable"] = True
        logger = get_logger(primary_path=settings.log_path, level=settings.log_level)
        logger.info("startup health checks completed", extra={"event_type": "health_check", "metadata": checks})
        checks["logger_writable"] = True
    except (ConfigError, OSError):
        return False, checks
    return all(checks.values()), checks


def _format_args(args: Iterable[str]) -> str:
    return " ".join(args) or "<no arguments>"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    ok, checks = run_startup_health_checks()
    logger = get_logger()
    if not ok:
        logger.error("startup health checks failed", extra={"event_type": "health_check", "metadata": checks})
        return 1

    if args and args[0] == "install":
        message = f"Playwright stub: skipping browser installation for arguments: {_format_args(args[1:])}"
    else:
        message = f"Playwright stub: no CLI actions required for arguments: {_format_args(args)}"
    print(message)
    logger.info(message, extra={"event_type": "cli", "metadata": {"argv": args}})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
