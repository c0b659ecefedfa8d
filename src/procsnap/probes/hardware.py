"""
Hardware probes.

CPU identification and total host memory.
"""

from __future__ import annotations

from dataclasses import dataclass

import psutil

from procsnap.probes.base import BaseProbe, printable


@dataclass(frozen=True)
class CpuInfo:
    """CPU model string and logical core count."""

    model: str
    cores: int


class CpuInfoProbe(BaseProbe):
    """Reads the CPU model name and counts logical cores."""

    name = "cpu_info"
    description = "CPU model from /proc/cpuinfo and logical core count"

    def collect(self) -> CpuInfo:
        """
        Collect CPU information.

        The model comes from the first "model name" line of /proc/cpuinfo;
        architectures without one yield an empty model. The core count
        comes from psutil, not from the file.
        """
        model = ""
        for line in self.read_file_lines(self.proc_root / "cpuinfo"):
            if line.startswith("model name"):
                _, sep, value = line.partition(":")
                if sep:
                    model = printable(value.strip())
                    break

        cores = psutil.cpu_count(logical=True) or 0
        return CpuInfo(model=model, cores=cores)


class MemTotalProbe(BaseProbe):
    """Reads total host memory."""

    name = "mem_total"
    description = "Total host memory (kB) from /proc/meminfo"

    def collect(self) -> int:
        mem_total = 0
        for line in self.read_file_lines(self.proc_root / "meminfo"):
            if line.startswith("MemTotal:"):
                mem_total = self.scan_int(line, "MemTotal:")
        return mem_total
