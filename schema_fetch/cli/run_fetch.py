#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for fetching schemas and validating documents against them."""

import argparse
import json
import logging
import sys
from typing import List

from ..config import FetchConfig
from ..exceptions import SchemaFetchError
from ..file_io.source_reader import STDIN_ADDRESS
from ..schema.validation import load_instance, validate_document

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='schema-fetch',
        description='Fetch JSON Schemas from stdin, URLs or files and validate documents against them',
    )
    parser.add_argument('--config', help='YAML configuration file')
    parser.add_argument('--log-level', help='Logging level (default: WARNING)')

    # Shared by both subcommands so headers may follow the subcommand name
    header_parent = argparse.ArgumentParser(add_help=False)
    header_parent.add_argument(
        '-H', '--http-header',
        action='append',
        default=[],
        metavar='"NAME: VALUE"',
        help='HTTP header sent with URL requests (repeatable)',
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    fetch_parser = subparsers.add_parser('fetch', parents=[header_parent], help='Print the document at an address')
    fetch_parser.add_argument('address', help='"-" for stdin, a URL, or a file path')
    fetch_parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')

    validate_parser = subparsers.add_parser(
        'validate', parents=[header_parent], help='Validate an instance document against a schema'
    )
    validate_parser.add_argument('schema', help='Schema address')
    validate_parser.add_argument('instance', help='Instance address (JSON or YAML)')
    validate_parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )

    return parser


def _prints_machine_output(args: argparse.Namespace) -> bool:
    return args.command == 'fetch' or getattr(args, 'format', 'human') == 'json'


def _run_fetch(args: argparse.Namespace, config: FetchConfig) -> int:
    store = config.create_store()
    document = store.fetch(args.address)
    print(json.dumps(document, indent=args.indent, ensure_ascii=False))
    return 0


def _run_validate(args: argparse.Namespace, config: FetchConfig) -> int:
    store = config.create_store()
    instance = load_instance(args.instance, store.headers)
    issues = validate_document(instance, args.schema, store)

    if args.format == 'json':
        output = {
            'schema': args.schema,
            'instance': args.instance,
            'errors': len(issues),
            'issues': [{'message': i.message, 'path': i.path} for i in issues],
        }
        print(json.dumps(output, indent=2))
    else:
        for issue in issues:
            location = f" at {issue.path}" if issue.path else ""
            print(f"  ERROR{location}: {issue.message}")
        if not issues:
            print(f"{args.instance} is valid against {args.schema}.")

    return 1 if issues else 0


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the schema-fetch CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'validate' and args.schema == STDIN_ADDRESS and args.instance == STDIN_ADDRESS:
        parser.error('schema and instance cannot both be read from stdin')

    try:
        config = FetchConfig.from_env()
        if args.config:
            config = FetchConfig.from_file(args.config, base=config)
        config = config.merged(log_level=args.log_level, http_headers=args.http_header)
        config.set_logging(stdout_reserved=_prints_machine_output(args))

        if args.command == 'fetch':
            code = _run_fetch(args, config)
        else:
            code = _run_validate(args, config)
    except SchemaFetchError as e:
        logger.error(f"{e.kind}: {e}")
        sys.exit(1)

    sys.exit(code)


if __name__ == '__main__':
    main()
