#!/usr/bin/env python3
"""Command-line interface for strkit.

Usage:
    strkit slugify " This is a tesT "
    strkit slugify " This is a tesT " --delimiter :
    strkit ends-with test --substring st
    strkit title helloWorld
    echo "hello_world" | strkit snake-to-camel -
    strkit detect-object "{a: 1}"
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, Optional

import yaml

from strkit import string_utils
from strkit.config import get_config_value, load_config
from strkit.string_utils import TextCoercionError


logger = logging.getLogger(__name__)

# Operations taking a single text argument
TEXT_OPERATIONS: Dict[str, Callable[[Any], Any]] = {
    'trim': string_utils.trim,
    'capitalize': string_utils.capitalize,
    'camel': string_utils.camel,
    'count': string_utils.count,
    'lower': string_utils.lower,
    'upper': string_utils.upper,
    'capitalize_all': string_utils.capitalize_all,
    'snake_to_camel': string_utils.snake_to_camel,
    'snake': string_utils.snake,
    'words': string_utils.words,
    'title': string_utils.title,
}

OPERATIONS = sorted([*TEXT_OPERATIONS, 'slugify', 'ends_with', 'starts_with', 'detect_object'])


def operation_name(value: str) -> str:
    """Normalize an operation name so 'ends-with' and 'ends_with' both work."""
    return value.strip().lower().replace('-', '_')


def setup_argparser() -> argparse.ArgumentParser:
    """Set up the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog='strkit',
        description='Apply a string transformation to TEXT and print the result.',
        epilog='Example: strkit slugify " This is a tesT " --delimiter :',
    )

    parser.add_argument(
        'operation',
        type=operation_name,
        choices=OPERATIONS,
        metavar='OPERATION',
        help=f"One of: {', '.join(OPERATIONS)}",
    )

    parser.add_argument(
        'text',
        metavar='TEXT',
        help='Input text, or - to read from standard input',
    )

    parser.add_argument(
        '--delimiter', '-d',
        help='Slug delimiter (default: slugify.delimiter from config)',
    )

    parser.add_argument(
        '--substring', '-s',
        help='Substring for ends_with / starts_with',
    )

    parser.add_argument(
        '--position', '-p',
        type=int,
        help='Position for ends_with / starts_with',
    )

    parser.add_argument(
        '--config', '-c',
        help='Path to a YAML config file (default: bundled default.yaml)',
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output',
    )

    return parser


def configure_logging(config: Dict[str, Any], verbose: bool = False) -> None:
    """Configure root logging from the 'cli' config section.

    Args:
        config: Loaded configuration.
        verbose: Force DEBUG level.

    Raises:
        ValueError: If the configured log level is unknown.
    """
    level_name = str(get_config_value(config, 'cli.log_level', 'WARNING')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level,
        format=get_config_value(config, 'cli.log_format', '%(asctime)s %(levelname)s %(message)s'),
        datefmt=get_config_value(config, 'cli.date_format', '%Y-%m-%d %H:%M:%S'),
    )

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def read_text(value: str) -> str:
    """Return the TEXT argument, reading standard input for '-'."""
    if value != '-':
        return value

    data = sys.stdin.read()
    if data.endswith('\r\n'):
        return data[:-2]
    if data.endswith('\n'):
        return data[:-1]
    return data


def run_operation(
    operation: str,
    text: str,
    args: argparse.Namespace,
    config: Dict[str, Any],
) -> Any:
    """Dispatch an operation with its options.

    Args:
        operation: Normalized operation name.
        text: Input text.
        args: Parsed command-line arguments.
        config: Loaded configuration.

    Returns:
        The operation result.

    Raises:
        ValueError: If a required option is missing.
        yaml.YAMLError: If detect_object input is not valid YAML.
    """
    if operation == 'slugify':
        delimiter = args.delimiter
        if delimiter is None:
            delimiter = get_config_value(config, 'slugify.delimiter', '-')
        return string_utils.slugify(text, delimiter)

    if operation in ('ends_with', 'starts_with'):
        if args.substring is None:
            raise ValueError(f"--substring is required for {operation}")
        if operation == 'ends_with':
            return string_utils.ends_with(text, args.substring, args.position)
        return string_utils.starts_with(text, args.substring, args.position)

    if operation == 'detect_object':
        return string_utils.detect_object(yaml.safe_load(text))

    return TEXT_OPERATIONS[operation](text)


def format_result(result: Any) -> str:
    """Render a result for printing."""
    if isinstance(result, bool):
        return 'true' if result else 'false'
    return str(result)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = setup_argparser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(config, args.verbose)

        text = read_text(args.text)
        logger.debug(f"Running {args.operation} on {len(text)} characters")

        result = run_operation(args.operation, text, args, config)
        print(format_result(result))
        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except yaml.YAMLError as e:
        print(f"YAML error: {e}", file=sys.stderr)
        return 1
    except TextCoercionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid argument: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
