"""
config.py — Per-invocation settings for s3cp / s3rm.

Values come from command-line flags, falling back to environment knobs:

  S3TOOLS_REGION       : AWS region of the target bucket (default: us-east-1)
  S3TOOLS_ENDPOINT_URL : Optional S3-compatible endpoint, e.g. a MinIO server

Credentials are never read here; boto3 resolves them from its usual chain
(env vars, ~/.aws/credentials, instance profile, ...).
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class ToolConfig:
    quiet: bool = False
    debug: bool = False
    region: str = DEFAULT_REGION
    reduced_redundancy: bool = False
    endpoint_url: Optional[str] = None

    @classmethod
    def from_args(cls, args, environ: Optional[Mapping[str, str]] = None) -> "ToolConfig":
        """
        Build a config from an argparse namespace.

        Flags win over the environment; ``--rr`` is only defined for s3cp, so
        it is read with a default.
        """
        env = os.environ if environ is None else environ
        region = args.region or env.get("S3TOOLS_REGION") or DEFAULT_REGION
        endpoint_url = args.endpoint_url or env.get("S3TOOLS_ENDPOINT_URL") or None
        return cls(
            quiet=bool(args.quiet),
            debug=bool(args.debug),
            region=region,
            reduced_redundancy=bool(getattr(args, "rr", False)),
            endpoint_url=endpoint_url,
        )
