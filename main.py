import logging
import sys
from typing import List, Optional

# Internal Module Imports
from awsalarms import (
    CloudWatchAlarms,
    CloudWatchAlarmsConfig,
    LineProtocolAccumulator,
    Shim,
)
from awsalarms.core.exceptions import ConfigurationError
from awsalarms.utils import validate_config_path
from cli_parser import CliArgs, CliParser
from logger import LoggerSetup

# Constants & Config
from constants import LOG_FORMAT


def load_plugin(config_path: str, logger: logging.Logger) -> CloudWatchAlarms:
    """Validate the config path, load the config and build the input."""
    path = validate_config_path(config_path, logger)
    config = CloudWatchAlarmsConfig.from_file(path)
    return CloudWatchAlarms(config)


def run(args: CliArgs, logger: logging.Logger) -> int:
    """Run the input; with --once the exit status reflects reported errors."""
    plugin = load_plugin(args.config, logger)
    acc = LineProtocolAccumulator()
    shim = Shim(plugin, acc=acc)

    if args.once:
        shim.gather_once()
        return 1 if acc.error_count else 0

    try:
        shim.run(args.poll_interval)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        shim.stop()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    # Parse CLI arguments using CliParser
    args: CliArgs = CliParser.parse_arguments(argv)

    # Initialize logger (configured once)
    logger = LoggerSetup(LOG_FORMAT, args.log_level).get_logger("main")
    logger.info("Starting awsalarms input")

    try:
        CliParser.validate_poll_interval(args, logger)
        return run(args, logger)
    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        print(f"Err loading input: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
