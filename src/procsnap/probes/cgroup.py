"""
Cgroup v1 limit probes.

Memory and CFS CPU ceilings of the cgroup the process runs in. Hosts on
cgroup v2, or without cgroups, have no such files and the probes raise
OSError.
"""

from __future__ import annotations

import re

from procsnap.probes.base import BaseProbe, ProbeError

# The kernel reports "no limit" as a page-aligned value near 2^63
MEMORY_UNLIMITED_THRESHOLD = (1 << 63) - 4096

_UINT64_MAX = (1 << 64) - 1
_DECIMAL = re.compile(r"[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ZeroPeriodError(ProbeError):
    """Raised when cpu.cfs_period_us is zero."""


def parse_uint64(value: str) -> int:
    """Parse a base-10 unsigned 64-bit integer, rejecting signs and spaces."""
    if not _DECIMAL.fullmatch(value):
        raise ValueError(f"invalid unsigned integer: {value!r}")
    number = int(value)
    if number > _UINT64_MAX:
        raise ValueError(f"value out of range: {value!r}")
    return number


def parse_float(value: str) -> float:
    """Parse a decimal float, rejecting the underscores and spaces float() allows."""
    if not _FLOAT.fullmatch(value):
        raise ValueError(f"invalid number: {value!r}")
    return float(value)


class CgroupMemoryProbe(BaseProbe):
    """Reads the cgroup v1 memory limit."""

    name = "cgroup_memory"
    description = "Memory limit from memory/memory.limit_in_bytes"

    def collect(self) -> int | None:
        """Return the limit in bytes, or None when unlimited."""
        value = self.read_trim(self.cgroup_root / "memory" / "memory.limit_in_bytes")
        limit = parse_uint64(value)
        if limit >= MEMORY_UNLIMITED_THRESHOLD:
            return None
        return limit


class CgroupCpuProbe(BaseProbe):
    """Reads the cgroup v1 CFS quota and period."""

    name = "cgroup_cpu"
    description = "CPU limit in cores from cpu/cpu.cfs_quota_us and cpu.cfs_period_us"

    def collect(self) -> float | None:
        """
        Return quota / period as a fractional core count.

        Returns:
            None when the quota is "-1" (unlimited), whatever the period holds.

        Raises:
            ValueError: If either value is not a number.
            ZeroPeriodError: If the period is zero.
        """
        cpu_dir = self.cgroup_root / "cpu"
        quota_str = self.read_trim(cpu_dir / "cpu.cfs_quota_us")
        period_str = self.read_trim(cpu_dir / "cpu.cfs_period_us")

        if quota_str == "-1":
            return None

        quota = parse_float(quota_str)
        period = parse_float(period_str)
        if period == 0:
            raise ZeroPeriodError("cpu.cfs_period_us is zero")

        return quota / period
