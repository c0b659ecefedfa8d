"""
Process probes.

Facts about the running process itself, read from /proc/self.
"""

from __future__ import annotations

import os

from procsnap.probes.base import BaseProbe, ProbeError, printable


class FdCountProbe(BaseProbe):
    """Counts the open file descriptors of the current process."""

    name = "fd_count"
    description = "Open file descriptor count from /proc/self/fd"

    def collect(self) -> int:
        return len(os.listdir(self.proc_root / "self" / "fd"))


class RssProbe(BaseProbe):
    """Reads the resident set size of the current process."""

    name = "rss"
    description = "Resident memory (VmRSS, kB) from /proc/self/status"

    def collect(self) -> int:
        """Return VmRSS in kilobytes. The first VmRSS line wins."""
        for line in self.read_file_lines(self.proc_root / "self" / "status"):
            if line.startswith("VmRSS:"):
                return self.scan_int(line, "VmRSS:")
        raise ProbeError("VmRSS not found")


class ExePathProbe(BaseProbe):
    """Resolves the path of the running executable."""

    name = "exe_path"
    description = "Executable path from the /proc/self/exe link"

    def collect(self) -> str:
        return printable(os.readlink(self.proc_root / "self" / "exe"))
