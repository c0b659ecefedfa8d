"""
Filesystem probe.

Capacity and free space of every mounted filesystem listed in /proc/mounts.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from procsnap.probes.base import BaseProbe, printable

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


@dataclass(frozen=True)
class DiskInfo:
    """One mounted filesystem."""

    mountpoint: str
    fstype: str
    total: int
    free: int


def unescape_mount_field(value: str) -> str:
    """Decode the octal escapes /proc/mounts uses for spaces, tabs and backslashes."""
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), value)


class DisksProbe(BaseProbe):
    """Collects mounted filesystem sizes."""

    name = "disks"
    description = "Mounted filesystems from /proc/mounts with statvfs sizes"

    def collect(self) -> list[DiskInfo]:
        """
        Collect mount information in /proc/mounts order.

        Lines with fewer than three fields and pseudo filesystems listed in
        ``excluded_fstypes`` are skipped. A mount whose statvfs call fails
        is left out without an error. Undecodable path bytes are passed to
        statvfs as read and reported as U+FFFD.
        """
        excluded = set(self.config.excluded_fstypes)
        disks = []

        for line in self.read_file_lines(self.proc_root / "mounts"):
            if not line:
                continue

            parts = line.split()
            if len(parts) < 3:
                continue

            mountpoint = unescape_mount_field(parts[1])
            fstype = parts[2]

            if fstype in excluded:
                continue

            try:
                stat = os.statvfs(mountpoint)
            except (OSError, ValueError) as e:
                self.logger.debug(f"Skipping {printable(mountpoint)}: {e}")
                continue

            disks.append(
                DiskInfo(
                    mountpoint=printable(mountpoint),
                    fstype=fstype,
                    total=stat.f_blocks * stat.f_bsize,
                    free=stat.f_bfree * stat.f_bsize,
                )
            )

        return disks
