#!/usr/bin/env python3
"""
Build WCTR - command-line front end

Run inside a ninja build directory to list the build steps that are
responsible for the most wall-clock time.
"""

import argparse
import json
import logging
import os
import sys

from build_wctr import WctrAnalyzer, LogAnalysisError
from build_wctr.formatters import format_extension_table, format_summary, format_wctr_table
from build_wctr.web import prepare_results

DEFAULT_LOG_NAME = '.ninja_log'


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be 0 or greater")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Rank build steps by wall-clock time responsibility (WCTR).',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_build.py 20
  python analyze_build.py 0 -C out/Release
  python analyze_build.py 10 --file build.trace.json --format chrome
  python analyze_build.py 15 --last-build-only --by-extension 5 --summary
        """
    )
    parser.add_argument('num_lines', nargs='?', type=non_negative_int, default=0,
                        help='Number of tasks to show, 0 for all (default: 0)')
    parser.add_argument('-C', dest='directory', default='.',
                        help='Build directory containing .ninja_log')
    parser.add_argument('-f', '--file', dest='log_file', default=None,
                        help='Log file to analyze (overrides -C)')
    parser.add_argument('--format', dest='log_format', choices=['auto', 'ninja', 'chrome'], default='auto',
                        help='Log format (default: auto)')
    parser.add_argument('--log-version', dest='log_versions', type=int, action='append', default=None,
                        help='Accepted ninja log version, may be repeated (default: 5)')
    parser.add_argument('--last-build-only', action='store_true',
                        help='Only analyze the last build appended to the log')
    parser.add_argument('--by-extension', type=non_negative_int, default=None, metavar='N',
                        help='Also show WCTR per output type (N rows, 0 for all)')
    parser.add_argument('--summary', action='store_true',
                        help='Also show build-wide totals')
    parser.add_argument('--json', dest='as_json', action='store_true',
                        help='Print results as JSON instead of a table')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress information')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.last_build_only and args.log_format == 'chrome':
        parser.error('--last-build-only only applies to ninja logs')

    log_file = args.log_file or os.path.join(args.directory, DEFAULT_LOG_NAME)

    analyzer = WctrAnalyzer(
        num_lines=args.num_lines,
        log_format=args.log_format,
        accepted_versions=args.log_versions or (5,),
        last_build_only=args.last_build_only
    )

    try:
        analyzer.process_log_file(log_file)
    except FileNotFoundError:
        print(f"Error: File '{log_file}' not found.", file=sys.stderr)
        sys.exit(1)
    except (LogAnalysisError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if args.as_json:
        print(json.dumps(prepare_results(analyzer), indent=2))
        return

    for line in format_wctr_table(analyzer.attributions, analyzer.intervals, args.num_lines):
        print(line)

    if args.by_extension is not None:
        print()
        for line in format_extension_table(analyzer.extension_breakdown, args.by_extension):
            print(line)

    if args.summary:
        print()
        for line in format_summary(analyzer.summary):
            print(line)


if __name__ == "__main__":
    main()
