"""GitHub Actions workflow command helpers."""

from __future__ import annotations

import sys
from typing import TextIO


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Emit an ``::error::`` command so the runner marks the step failed.

    The caller is still responsible for exiting with a non-zero code.
    """
    out = stream or sys.stdout
    out.write(f"::error::{escape_data(message)}\n")
    out.flush()
