import argparse
import logging
from typing import List, NamedTuple, Optional

from constants import DEFAULT_LOG_LEVEL, DEFAULT_POLL_INTERVAL


class CliArgs(NamedTuple):
    config: str
    poll_interval: Optional[float]
    once: bool
    log_level: str


class CliParser:
    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Pull Alarm States from Amazon CloudWatch"
        )
        parser.add_argument(
            "--config",
            "-c",
            type=str,
            required=True,
            help="Path to the config file for this plugin.",
        )
        parser.add_argument(
            "--poll-interval",
            type=float,
            default=DEFAULT_POLL_INTERVAL,
            help="How often to send metrics, in seconds (default: %(default)s).",
        )
        parser.add_argument(
            "--poll-interval-disabled",
            action="store_true",
            help="Gather once for every line read from stdin instead of on a timer.",
        )
        parser.add_argument(
            "--once",
            action="store_true",
            help="Run a single gather and exit.",
        )
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            default=DEFAULT_LOG_LEVEL,
            help="Logging level (default: %(default)s).",
        )
        return parser

    @staticmethod
    def parse_arguments(argv: Optional[List[str]] = None) -> CliArgs:
        args = CliParser.build_parser().parse_args(argv)
        return CliArgs(
            config=args.config,
            poll_interval=None if args.poll_interval_disabled else args.poll_interval,
            once=args.once,
            log_level=args.log_level,
        )

    @staticmethod
    def validate_poll_interval(args: CliArgs, logger: logging.Logger) -> None:
        """
        Validate that the poll interval is positive when polling on a timer.
        Raises a ValueError if validation fails.
        """
        if args.poll_interval is not None and args.poll_interval <= 0:
            error_message = f"Poll interval must be positive, got {args.poll_interval}."
            logger.error(error_message)
            raise ValueError(error_message)
