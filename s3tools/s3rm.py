"""
s3rm.py — Remove one object from an S3 bucket.

Usage:
  s3rm [--help] [--quiet] [--debug] [--region NAME] s3:bucket:/path/to/file

IAM policy requirement: s3:DeleteObject
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import sys
from typing import List, Optional

from s3tools import store as store_mod
from s3tools.config import ToolConfig
from s3tools.errors import S3ToolsError
from s3tools.log import build_logger
from s3tools.options import EXIT_FAILURE, build_parser
from s3tools.transfer import remove


def make_parser():
    parser = build_parser(
        prog="s3rm",
        description="Removes an object from an S3 bucket.",
        epilog="The path is required and must be an s3 path.",
    )
    parser.add_argument("path", help="The S3 object to delete, like s3:bucket:/path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    config = ToolConfig.from_args(args)
    log = build_logger(config)
    log.debug(f"got args {sys.argv if argv is None else argv}")

    try:
        store = store_mod.build_store(config)
        remove(args.path, store)
    except S3ToolsError as exc:
        log.error(str(exc))
        return EXIT_FAILURE

    log.info(f"{args.path} removed")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
