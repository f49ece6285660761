"""Configuration for console I/O."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_READ_SIZE = 16


@dataclass
class ConsoleConfig:
    """Console configuration.

    ``read_size`` bounds a single input read, ``write_log`` names a file all
    output is mirrored to (empty disables it).
    """

    read_size: int = DEFAULT_READ_SIZE
    encoding: str = "utf-8"
    write_log: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConsoleConfig:
        """Build a config from ``VT_READ_SIZE`` and ``VT_WRITE_LOG``."""
        env = os.environ if environ is None else environ
        config = cls(write_log=env.get("VT_WRITE_LOG", ""))

        raw_size = env.get("VT_READ_SIZE", "")
        if raw_size:
            try:
                size = int(raw_size)
            except ValueError:
                raise ValueError(f"VT_READ_SIZE must be an integer, got {raw_size!r}") from None
            if size < 1:
                raise ValueError(f"VT_READ_SIZE must be at least 1, got {size}")
            config.read_size = size

        return config
