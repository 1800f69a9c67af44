"""
Command-line interface for utilbelt
"""
import argparse
import asyncio
import json
import logging
import os
import sys

from .config import Config
from .core import (
    ms_to_time,
    ms_to_unit,
    ms_to_time_string,
    parse_time_string,
    round_to,
    paginate,
)
from .rendering import get_bar
from .services import body as body_svc
from .services.errors import ConfigError, JSONParseError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
DEFAULT_CONFIG_NAMES = ('utilbelt.yml', 'utilbelt.yaml')


def find_default_config(cwd=None):
    """Return the first ``utilbelt.yml``/``utilbelt.yaml`` in ``cwd``, if any."""
    cwd = cwd or os.getcwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = os.path.join(cwd, name)
        if os.path.exists(candidate):
            return candidate
    return None


def parse_number(value):
    """Parse an argument as ``int`` when possible so large values stay exact."""
    try:
        return int(value)
    except ValueError:
        return float(value)


async def iter_chunks(stream, chunk_size=CHUNK_SIZE):
    """Yield successive reads from a file-like object until it is exhausted."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        yield chunk


def cmd_time(args, config):
    if args.unit:
        print(ms_to_unit(args.milliseconds, args.unit))
        return 0
    simple = bool(config.get('simple'))
    print(ms_to_time_string(ms_to_time(args.milliseconds), simple=simple))
    return 0


def cmd_parse(args, config):
    print(parse_time_string(args.text))
    return 0


def cmd_round(args, config):
    digits = args.digits if args.digits is not None else config.get('round_digits', 0)
    print(round_to(args.number, int(digits)))
    return 0


def cmd_bar(args, config):
    defaults = Config.DEFAULT_CONFIG['bar']
    print(get_bar(
        args.progress,
        filled=config.get('bar.filled') or defaults['filled'],
        empty=config.get('bar.empty') or defaults['empty'],
    ))
    return 0


def cmd_paginate(args, config):
    size = args.size if args.size is not None else config.get('page_size')
    for page in paginate(args.items, int(size)):
        print(' '.join(page))
    return 0


def cmd_json(args, config):
    if args.file:
        logger.info("Reading JSON body from %s", args.file)
        with open(args.file, 'rb') as f:
            value = asyncio.run(body_svc.get_json_response(iter_chunks(f)))
    else:
        stream = getattr(sys.stdin, 'buffer', sys.stdin)
        value = asyncio.run(body_svc.get_json_response(iter_chunks(stream)))
    print(json.dumps(value, ensure_ascii=False, sort_keys=True))
    return 0


def build_parser():
    """Build the argument parser with one subcommand per helper."""
    parser = argparse.ArgumentParser(prog='utilbelt', description='Duration, rounding, progress bar and pagination helpers')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p_time = subparsers.add_parser('time', help='Format a millisecond count as a duration')
    p_time.add_argument('milliseconds', type=parse_number, help='Duration in milliseconds')
    p_time.add_argument('--unit', choices=['s', 'm', 'h', 'd'], help='Print the total in a single unit instead')
    p_time.add_argument('--simple', action='store_true', default=None, help='Use the compact H:MM:SS format')
    p_time.set_defaults(func=cmd_time)

    p_parse = subparsers.add_parser('parse', help="Convert a string like '1h 30m' to milliseconds")
    p_parse.add_argument('text', type=str, help='Time string made of <number><s|m|h|d> tokens')
    p_parse.set_defaults(func=cmd_parse)

    p_round = subparsers.add_parser('round', help='Round a number half away from zero')
    p_round.add_argument('number', type=float, help='Number to round')
    p_round.add_argument('--digits', type=int, help='Decimal places (default from config)')
    p_round.set_defaults(func=cmd_round)

    p_bar = subparsers.add_parser('bar', help='Render a progress bar for a percentage')
    p_bar.add_argument('progress', type=str, help='Progress percentage (0-100)')
    p_bar.set_defaults(func=cmd_bar)

    p_page = subparsers.add_parser('paginate', help='Split items into pages, one page per line')
    p_page.add_argument('items', nargs='*', help='Items to paginate')
    p_page.add_argument('--size', type=int, help='Page size (default from config)')
    p_page.set_defaults(func=cmd_paginate)

    p_json = subparsers.add_parser('json', help='Read a JSON body from a file or stdin and print it')
    p_json.add_argument('file', nargs='?', help='File to read (default: stdin)')
    p_json.set_defaults(func=cmd_json)

    return parser


def main(argv=None):
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(config_file=args.config or find_default_config())
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # CLI flags take precedence over the configuration file
    config.update_from_args({
        'simple': getattr(args, 'simple', None),
        'log_level': 'DEBUG' if args.verbose else None,
    })

    level = str(config.get('log_level', 'WARNING')).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    logger.debug("Running command %s", args.command)

    try:
        return args.func(args, config)
    except (JSONParseError, ValueError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
