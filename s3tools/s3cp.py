"""
s3cp.py — Upload or download one file to/from an S3 bucket, using scp conventions.

Usage:
  s3cp [--help] [--quiet] [--debug] [--region NAME] [--rr] source destination

Examples:
  s3cp s3:mybucket:/myfolder/backup.tar.gz /tmp
    - downloads backup.tar.gz from S3 and places it in the /tmp folder

  s3cp s3:mybucket:/myfolder/backup.tar.gz /tmp/foobar.tar.gz
    - downloads backup.tar.gz from S3 into the file /tmp/foobar.tar.gz

  s3cp --rr /tmp/backup.tar.gz s3:mybucket:/myfolder/
    - uploads backup.tar.gz to mybucket as /myfolder/backup.tar.gz, reduced redundancy

Notes:
  - Exactly one of source/destination must be an s3 path.
  - --rr only affects uploads.
  - Exits 0 on success, 1 on bad usage or a failed transfer.
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import sys
from typing import List, Optional

from s3tools import store as store_mod
from s3tools.config import ToolConfig
from s3tools.errors import InvalidOperation, S3ToolsError
from s3tools.log import build_logger
from s3tools.options import EXIT_FAILURE, build_parser
from s3tools.transfer import copy


def make_parser():
    parser = build_parser(
        prog="s3cp",
        description="Uploads or downloads a file from an S3 bucket, using scp conventions.",
        epilog="Both source and destination are required; one must be an s3 path, "
        "the other a local path.",
    )
    parser.add_argument("--rr", action="store_true", help="(optional) Sets the upload to reduced redundancy")
    parser.add_argument(
        "source",
        help="The source of the copy, either a local file path or an s3 path like s3:bucket:/path",
    )
    parser.add_argument(
        "destination",
        help="The destination of the copy, in the same format as source",
    )
    return parser


# ──────────────────────────────────────────────────────────────────────────────
# main()
# Parses flags, builds a boto3-backed store for the chosen region and runs
# the copy. Returns the process exit code.
# ──────────────────────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    config = ToolConfig.from_args(args)
    log = build_logger(config)
    log.debug(f"got args {sys.argv if argv is None else argv}")

    try:
        store = store_mod.build_store(config)
        copy(args.source, args.destination, store, config)
    except InvalidOperation as exc:
        log.error(str(exc))
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE
    except S3ToolsError as exc:
        log.error(str(exc))
        return EXIT_FAILURE

    log.info(f"{args.source} -> {args.destination} : transfer complete")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
