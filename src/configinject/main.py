"""
Main entry point: run the hard-coded and the injected demonstrations.
"""

import argparse
import sys

from pydantic import ValidationError

from . import __version__
from .config.container import hard_coded_consumer, setup_container
from .config.settings import get_runtime_settings
from .core.errors import ConfigurationError
from .core.fingerprint import settings_fingerprint
from .observability.logging import clear_run_label, get_logger, set_run_label, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hard-coded versus injected settings demonstration"
    )
    parser.add_argument(
        "--source", choices=["env", "file"], default=None, help="Where to read configuration"
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Read configuration from this key/value file (implies --source file)",
    )
    parser.add_argument("--prefix", default=None, help="Environment key prefix with --source env")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level",
    )
    parser.add_argument(
        "--no-wait", action="store_true", help="Exit without waiting for a line on stdin"
    )
    parser.add_argument("--version", action="store_true", help="Show version")
    return parser


def main(argv=None):
    """Run both demonstrations, writing their reports to stdout."""
    parser = build_parser()

    if argv is None:
        argv = []
    args = parser.parse_args(argv)

    if args.version:
        print(f"configinject v{__version__}")
        return

    # Apply CLI overrides on top of environment-driven runtime settings
    settings = get_runtime_settings()
    overrides = {}
    if args.source:
        overrides["source"] = args.source
    if args.env_file:
        if args.source == "env":
            parser.error("--env-file cannot be combined with --source env")
        overrides["source"] = "file"
        overrides["env_file"] = args.env_file
    if args.prefix is not None:
        overrides["key_prefix"] = args.prefix
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(
        args.log_level or ("DEBUG" if settings.debug else settings.observability.log_level)
    )
    logger.info(
        "Starting demonstration",
        service=settings.observability.service_name,
        source=settings.source,
    )

    try:
        set_run_label("hard-coded")
        print("Hard-coded example: ")
        hard_coded_consumer().run()

        set_run_label("injected")
        print("Injection example: ")
        container = setup_container(settings)
        container.require("consumer").run()

        logger.info(
            "Injected settings resolved",
            source=settings.source,
            fingerprint=settings_fingerprint(
                container.require("email_settings"),
                container.require("flux_capacitor_settings"),
            )[:16],
        )
    finally:
        clear_run_label()

    if settings.wait_for_input and not args.no_wait:
        try:
            input()
        except EOFError:
            pass


def cli_main():
    """CLI entry point."""
    try:
        main(sys.argv[1:])
        sys.exit(0)
    except KeyboardInterrupt:
        sys.exit(0)
    except ConfigurationError as e:
        logger.error(f"Configuration failed: {e}", key=e.key)
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        # Invalid CONFIGINJECT_* runtime settings
        logger.error(f"Invalid runtime settings: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
