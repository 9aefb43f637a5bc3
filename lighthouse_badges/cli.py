"""Command-line interface for the Lighthouse badge generator.

Provides argument parsing and the main entry point. Every flag mirrors an
action input and overrides the matching INPUT_* environment variable.
Credentials are only read from the environment.
"""

import argparse
import os
import sys
from typing import Optional

from lighthouse_badges.config import load_config
from lighthouse_badges.reporters import ConsoleReporter, GitHubActionsReporter, Reporter
from lighthouse_badges.runner import BadgeRunner


# Flag destination -> action input name
INPUT_FLAGS = {
    "reports_path": "reports-path",
    "upload_destination": "upload-destination",
    "upload_reports": "upload-reports",
    "result_categories": "result-categories",
    "s3_prefix": "s3-prefix",
}


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="lighthouse-badges",
        description="Generate score badges from Lighthouse reports and upload them",
    )

    parser.add_argument(
        "-r", "--reports-path",
        metavar="DIR",
        help="Directory containing *.report.json files (default: current directory)",
    )

    parser.add_argument(
        "-c", "--result-categories",
        metavar="LIST",
        help="Comma-separated list of categories to render badges for",
    )

    parser.add_argument(
        "-d", "--upload-destination",
        metavar="NAME",
        help="Upload backend: s3, azure, or anything else to skip uploads (default: s3)",
    )

    parser.add_argument(
        "--upload-reports",
        action="store_const",
        const="true",
        help="Also upload the raw report files",
    )

    parser.add_argument(
        "--s3-prefix",
        metavar="PREFIX",
        help="String prepended verbatim to every S3 key",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress informational output",
    )

    parser.add_argument(
        "--github-actions",
        action="store_true",
        help="Emit GitHub Actions workflow commands (default when GITHUB_ACTIONS=true)",
    )

    return parser.parse_args(argv)


def create_reporter(args: argparse.Namespace) -> Reporter:
    """Pick the reporter for this run.

    Args:
        args: Parsed command-line arguments

    Returns:
        GitHubActionsReporter inside Actions (or when forced), otherwise
        a ConsoleReporter
    """
    if args.github_actions or os.environ.get("GITHUB_ACTIONS") == "true":
        return GitHubActionsReporter()
    return ConsoleReporter(quiet=args.quiet)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code: 0 for success, 1 if any failure was signalled
    """
    args = parse_args(argv)

    overrides = {name: getattr(args, dest) for dest, name in INPUT_FLAGS.items()}
    config = load_config(overrides=overrides)

    reporter = create_reporter(args)
    BadgeRunner(config, reporter=reporter).run()

    return 1 if reporter.failed else 0


if __name__ == "__main__":
    sys.exit(main())
