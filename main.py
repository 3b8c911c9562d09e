"""Application entry point for Quill Cloud.

Updates:
  v0.1.2 - 2026-10-16 - Mirror settings failures to stdout.
  v0.1.1 - 2026-10-16 - Dispatch analyze, arrange, and cloud commands from COMMAND_SPECS.
  v0.1.0 - 2026-10-16 - Wire logging, settings, and CLI parsing.
"""

from __future__ import annotations

import logging

from cli.commands import COMMAND_SPECS
from cli.parser import build_parser, parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from cli.utils import print_and_log
from config import SettingsError, load_settings

EXIT_SETTINGS_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    """Entrypoint that wires settings, logging, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("quill_cloud.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        cause = exc.__cause__
        message = f"Failed to load settings: {exc}"
        if cause is not None:
            message = f"{message} ({cause})"
        print_and_log(logger, logging.ERROR, message)
        return EXIT_SETTINGS_ERROR

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    spec = COMMAND_SPECS.get(getattr(args, "command", None))
    if spec is None:
        build_parser().print_help()
        return 0
    return spec.handler(settings, args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
