"""Command-line interface for the word tracker.

Usage:
    wordtracker <input.txt> -pf|-pl|-po [-f<output.txt>]

    -pf   words with the files they appear in
    -pl   words with files and line numbers
    -po   words with files, line numbers and frequencies
    -f    write the report to a file instead of the console

The index persists between runs in a repository file (repository.ser in
the current directory unless --repository or WORDTRACKER_REPOSITORY says
otherwise), so each run adds its input file to everything indexed before.
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from . import __version__
from .config import LoggingConfig, ReportFormat, TrackerConfig
from .index import WordTracker
from .log import configure_logging, get_logger
from .reports import render_report

logger = get_logger(__name__)

EPILOG = """\
examples:
  wordtracker sample.txt -pf
  wordtracker sample.txt -pl -fresults.txt
  wordtracker sample.txt -po
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordtracker",
        description="Index the words of a text file and report where they occur.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", help="text file to index")

    report = parser.add_mutually_exclusive_group(required=True)
    report.add_argument("-pf", dest="report_format", action="store_const",
                        const=ReportFormat.FILES,
                        help="print words with file names")
    report.add_argument("-pl", dest="report_format", action="store_const",
                        const=ReportFormat.FILES_WITH_LINES,
                        help="print words with file names and line numbers")
    report.add_argument("-po", dest="report_format", action="store_const",
                        const=ReportFormat.FULL_DETAILS,
                        help="print full details (files, lines, frequency)")

    parser.add_argument("-f", dest="output_file", metavar="OUTPUT",
                        help="write the report to OUTPUT (e.g. -fresults.txt)")
    parser.add_argument("--repository", metavar="PATH",
                        help="index repository file (default: repository.ser)")
    parser.add_argument("--log-level", metavar="LEVEL",
                        help="DEBUG, INFO, WARNING (default) or ERROR")
    parser.add_argument("--log-file", metavar="PATH",
                        help="also write log records to PATH")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def _build_config(args: argparse.Namespace) -> TrackerConfig:
    config = TrackerConfig.from_env()
    overrides = {"report_format": args.report_format}
    if args.repository:
        overrides["repository_path"] = args.repository
    if args.log_level or args.log_file:
        overrides["log_config"] = LoggingConfig(
            level=args.log_level or config.log_config.level,
            log_file=args.log_file,
        )
    return dataclasses.replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the tracker.

    Returns:
        Process exit status (argparse exits with 2 on bad arguments)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output_file == "":
        parser.error("-f requires an output file name")

    config = _build_config(args)
    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    configure_logging(config.log_config, force=True)
    logger.debug("Repository: %s", config.repository_path)

    tracker = WordTracker(config)
    try:
        tracker.process_file(args.input_file)
    except FileNotFoundError:
        print(f"Error: File not found - {args.input_file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read {args.input_file} - {e}", file=sys.stderr)
        return 1

    if args.output_file is None:
        render_report(tracker.tree, config.report_format, sys.stdout)
        return 0

    try:
        with open(args.output_file, "w", encoding="utf-8") as out:
            render_report(tracker.tree, config.report_format, out)
    except OSError as e:
        print(f"Error: Cannot write to output file - {args.output_file} ({e})", file=sys.stderr)
        return 1

    print(f"Output written to: {args.output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
