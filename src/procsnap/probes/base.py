"""
Base probe class that all probes inherit from.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from procsnap.config import Config

logger = logging.getLogger(__name__)


def printable(value: str) -> str:
    """
    Swap undecodable filename bytes for U+FFFD.

    Paths read with surrogateescape keep their raw bytes for syscalls; this
    is the form that goes into reports.
    """
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class ProbeError(Exception):
    """Raised when a probe reads its source but cannot extract a value."""


class BaseProbe(ABC):
    """
    Abstract base class for all probes.

    A probe reads one OS-exposed data source and returns a typed value.
    Unlike a best-effort collector, a probe never hides a failed read:
    OSError and parse errors propagate to the caller, which decides how
    severe they are.
    """

    name: str = "base"
    description: str = "Base probe"

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    @property
    def proc_root(self) -> Path:
        return Path(self.config.proc_root)

    @property
    def cgroup_root(self) -> Path:
        return Path(self.config.cgroup_root)

    @abstractmethod
    def collect(self) -> Any:
        """
        Read the source and return the probed value.

        Raises:
            OSError: If the source cannot be read.
            ProbeError: If the source was read but holds no usable value.
        """
        pass

    def read_file(self, path: str | Path) -> str:
        """
        Read a whole file and return its contents.

        Bytes that are not UTF-8 are kept as surrogates, so paths taken from
        the file still name the same file when passed back to the OS.
        """
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            return f.read()

    def read_file_lines(self, path: str | Path) -> list[str]:
        """Read a file and return lines as list."""
        return self.read_file(path).split("\n")

    def read_trim(self, path: str | Path) -> str:
        """Read a single-value control file and strip surrounding whitespace."""
        return self.read_file(path).strip()

    @staticmethod
    def scan_int(line: str, key: str) -> int:
        """
        Parse the integer in a "<key> <int> kB" style line.

        Mirrors a lenient scanf: a line whose number cannot be parsed
        yields 0 instead of an error.
        """
        match = re.match(rf"{re.escape(key)}\s*([+-]?\d+)", line)
        if not match:
            logger.debug(f"No integer after {key!r} in {line!r}")
            return 0
        return int(match.group(1))
