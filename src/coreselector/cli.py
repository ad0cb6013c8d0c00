"""
Command-Line Interface - Argument Parsing and Entry Point

This module provides the command-line entry point for the selector demo
window. It handles:
- Command-line argument parsing
- Argument validation
- Logging set-up
- Application initialization with CLI parameters

Usage:
    python -m coreselector --entities entities.json --leaf-type SCENARIO
    python -m coreselector --help
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from coreselector.application import SelectorApplication
from coreselector.core.errors import ConfigurationError
from coreselector.models import NodeType, SelectorConfig, load_config


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: List of arguments to parse. If None, uses sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Cycle / scenario / pipeline / data node selector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --entities entities.json
  %(prog)s --entities entities.json --leaf-type SCENARIO --hide-cycles
  %(prog)s --entities entities.json --config selector.yaml --value SCENARIO_1
        """
    )

    parser.add_argument(
        "--entities",
        type=str,
        default=None,
        help="JSON file holding the entity payload"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML or JSON selector configuration file"
    )

    parser.add_argument(
        "--leaf-type",
        type=str,
        default=None,
        choices=[t.name for t in NodeType],
        help="Selectable entity type (overrides the configuration file)"
    )

    parser.add_argument(
        "--hide-cycles",
        action="store_true",
        help="Do not display cycles; show their scenarios in place"
    )

    parser.add_argument(
        "--no-pins",
        action="store_true",
        help="Disable pin buttons"
    )

    parser.add_argument(
        "--value",
        type=str,
        default=None,
        help="Entity id to select at start-up"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: INFO)"
    )

    return parser.parse_args(args)


def validate_args(args: argparse.Namespace) -> bool:
    """Validate parsed command-line arguments.

    Returns:
        True if arguments are valid, False otherwise

    This function validates:
    - The entity file exists if specified
    - The configuration file exists if specified
    """
    for label, value in (("Entity file", args.entities), ("Configuration file", args.config)):
        if not value:
            continue
        path = Path(value)
        if not path.exists():
            print(f"Error: {label} not found: {value}")
            return False
        if not path.is_file():
            print(f"Error: {label} path is not a file: {value}")
            return False

    return True


def setup_logging(level: str):
    """Configure application logging.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), None)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_config(args: argparse.Namespace) -> SelectorConfig:
    """Combine the configuration file with command-line overrides.

    Raises:
        ConfigurationError: If the configuration file is invalid
    """
    base = load_config(args.config) if args.config else SelectorConfig()
    data = base.to_dict()
    if args.leaf_type:
        data['leaf_type'] = args.leaf_type
    if args.hide_cycles:
        data['display_cycles'] = False
    if args.no_pins:
        data['show_pins'] = False
    return SelectorConfig.from_dict(data)


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    parsed_args = parse_args(args)

    setup_logging(parsed_args.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Starting core selector...")
    logger.debug(f"Arguments: entities={parsed_args.entities}, config={parsed_args.config}")

    if not validate_args(parsed_args):
        return 1

    try:
        config = build_config(parsed_args)
    except ConfigurationError as e:
        logger.error(e.format_log_message())
        print(f"Error: {e.format_user_message()}")
        return 1

    try:
        app = SelectorApplication(
            config=config,
            entities_path=parsed_args.entities,
            initial_value=parsed_args.value
        )
        exit_code = app.run()

        logger.info(f"Application exited with code {exit_code}")
        return exit_code

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
