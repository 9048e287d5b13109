"""
log.py — Console logging for the command-line tools.

Verbosity follows the flags in ToolConfig:
  --debug  -> DEBUG, debug lines prefixed with "DEBUG: " (overrides --quiet)
  --quiet  -> WARNING, so only errors reach the terminal
  default  -> INFO

Informational output goes to stdout, warnings and errors to stderr.
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import logging
import sys

from s3tools.config import ToolConfig

LOGGER_NAME = "s3tools"


class _BelowLevel(logging.Filter):
    """Pass only records strictly below ``level``."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


class _DebugPrefixFormatter(logging.Formatter):
    """Prefix DEBUG records with "DEBUG: "; everything else prints bare."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.DEBUG:
            return f"DEBUG: {message}"
        return message


def level_for(config: ToolConfig) -> int:
    if config.debug:
        return logging.DEBUG
    if config.quiet:
        return logging.WARNING
    return logging.INFO


def build_logger(config: ToolConfig) -> logging.Logger:
    """
    (Re)configure the ``s3tools`` logger for one invocation.

    Handlers are replaced on every call and bound to the current
    sys.stdout / sys.stderr.
    """
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)

    fmt = _DebugPrefixFormatter("%(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setFormatter(fmt)
    out.addFilter(_BelowLevel(logging.WARNING))

    err = logging.StreamHandler(sys.stderr)
    err.setFormatter(fmt)
    err.setLevel(logging.WARNING)

    log.addHandler(out)
    log.addHandler(err)
    log.setLevel(level_for(config))
    log.propagate = False
    return log


def get_logger(name: str) -> logging.Logger:
    """Child logger under ``s3tools`` for library modules."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
