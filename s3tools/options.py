"""
options.py — argparse pieces shared by s3cp and s3rm.
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import argparse
import sys

# Exit code for bad usage and for failed transfers alike.
EXIT_FAILURE = 1

PATH_HELP = """\
For a remote object: s3:bucket:/folder.../file.name
For a local object : /folder.../file.name
"""


class ToolArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1 instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser(prog: str, description: str, epilog: str) -> ToolArgumentParser:
    parser = ToolArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog + "\n" + PATH_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--quiet", action="store_true", help="(optional) Suppresses output")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="(optional) Used for debugging; outputs lots of debug info (overrides --quiet)",
    )
    parser.add_argument(
        "--region",
        default=None,
        help="(optional) The AWS region holding the target bucket; "
        "defaults to $S3TOOLS_REGION or 'us-east-1'",
    )
    parser.add_argument(
        "--endpoint-url",
        default=None,
        help="(optional) S3-compatible endpoint URL; defaults to $S3TOOLS_ENDPOINT_URL",
    )
    return parser
