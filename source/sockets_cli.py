#!/usr/bin/env python3

import sys
import argparse
from typing import List, Optional

from sockets_summary import (
    DEFAULT_LOG_LEVEL,
    EmptyResult,
    LogLevel,
    Logger,
    ReadFailure,
    SockstatError,
    SockstatReader,
    ToolConfig,
    UnknownArgument,
    extract_fields,
    format_raw,
    format_structured,
)

HELP_TEXT = """Socket Summary Analyzer

Usage: sockets-summary [OPTIONS]

Options:
  --json                 Output socket summary in JSON format
  --log-level LEVEL      Set log level (DEBUG, INFO, WARNING, ERROR)
  --path PATH            Path to sockstat file (default: /proc/net/sockstat)
  --help                 Display this help message

Examples:
  sockets-summary --json
  sockets-summary --log-level DEBUG
  sockets-summary --json --log-level WARNING
  sockets-summary --path /tmp/test-sockstat --json
"""


def show_help():
    print(HELP_TEXT)


class HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        show_help()
        parser.exit(0)


class SockstatArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UnknownArgument(message)


class SocketSummaryTool:
    def __init__(self):
        self.config = ToolConfig()
        self.logger = Logger(self.config)
        self.reader = SockstatReader(self.config, self.logger)

    def run(self, argv: Optional[List[str]] = None):
        exit_code = 0
        try:
            self.configure(self.parse_command_line(argv))

            self.reader.check_source_available()
            self.logger.info("Welcome to the Socket Summary Analyzer")

            summary = self.get_socket_summary()

            self.logger.info("Socket Summary:")
            print(summary.rstrip('\n'))

        except UnknownArgument as e:
            self.logger.error(str(e))
            show_help()
            exit_code = 1
        except SockstatError as e:
            self.logger.error(str(e))
            exit_code = 1

        sys.exit(exit_code)

    def configure(self, config: ToolConfig):
        self.config = config
        self.logger = Logger(config)
        self.reader = SockstatReader(config, self.logger)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = SockstatArgumentParser(
            description='Socket Summary Analyzer', add_help=False, allow_abbrev=False
        )
        parser.add_argument('--json', action='store_true', help='Output socket summary in JSON format')
        parser.add_argument('--log-level', type=str, help='Set log level (DEBUG, INFO, WARNING, ERROR)')
        parser.add_argument('--path', type=str, help='Path to sockstat file (default: /proc/net/sockstat)')
        parser.add_argument('--help', action=HelpAction, help='Display help message')
        return parser

    def parse_command_line(self, argv: Optional[List[str]] = None) -> ToolConfig:
        args, unknown = self.build_parser().parse_known_args(argv)

        if unknown:
            raise UnknownArgument(f"Unknown option: {unknown[0]}")

        log_level = DEFAULT_LOG_LEVEL
        if args.log_level is not None:
            if args.log_level.upper() in LogLevel.__members__:
                log_level = args.log_level.upper()
            else:
                print(
                    f"Warning: Invalid log level: {args.log_level}. Using default: {DEFAULT_LOG_LEVEL}",
                    file=sys.stderr,
                )

        options = {'log_level': log_level, 'json_output': args.json}
        if args.path is not None:
            options['sockstat_path'] = args.path
        return ToolConfig(**options)

    def get_socket_summary(self) -> str:
        try:
            snapshot = self.reader.read_source()
        except (ReadFailure, EmptyResult) as e:
            self.logger.error(str(e))
            raise SockstatError("Failed to retrieve socket summary") from e

        if self.config.json_output:
            return format_structured(extract_fields(snapshot.text))
        return format_raw(snapshot)


def main():
    app = SocketSummaryTool()
    app.run()


if __name__ == '__main__':
    main()
