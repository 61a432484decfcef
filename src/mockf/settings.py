from __future__ import annotations

import os

FORMAT_MODES = ("auto", "always", "never")


def go_command() -> str:
    """Return the Go command used to resolve import paths.

    Override with `MOCKF_GO`.
    """
    return os.environ.get("MOCKF_GO") or "go"


def gofmt_command() -> str:
    """Return the gofmt command. Override with `MOCKF_GOFMT`."""
    return os.environ.get("MOCKF_GOFMT") or "gofmt"


def format_mode() -> str:
    """Return the default pretty-printing mode (`MOCKF_FORMAT`, default "auto")."""
    mode = (os.environ.get("MOCKF_FORMAT") or "auto").strip().lower()
    if mode not in FORMAT_MODES:
        raise ValueError(f"MOCKF_FORMAT must be one of {', '.join(FORMAT_MODES)}, got {mode!r}")
    return mode
