"""
Probes for procsnap.

Each probe reads one OS data source and returns a typed value. The
registry order is the order in which the collector runs them.
"""

from __future__ import annotations

from procsnap.probes.base import BaseProbe, ProbeError
from procsnap.probes.cgroup import CgroupCpuProbe, CgroupMemoryProbe, ZeroPeriodError
from procsnap.probes.filesystem import DiskInfo, DisksProbe
from procsnap.probes.hardware import CpuInfo, CpuInfoProbe, MemTotalProbe
from procsnap.probes.process import ExePathProbe, FdCountProbe, RssProbe

# Registry of all probes, in collection order
PROBES: dict[str, type[BaseProbe]] = {
    "fd_count": FdCountProbe,
    "rss": RssProbe,
    "exe_path": ExePathProbe,
    "cpu_info": CpuInfoProbe,
    "mem_total": MemTotalProbe,
    "disks": DisksProbe,
    "cgroup_memory": CgroupMemoryProbe,
    "cgroup_cpu": CgroupCpuProbe,
}


def get_all_probes() -> dict[str, type[BaseProbe]]:
    """Return all registered probes."""
    return PROBES.copy()


__all__ = [
    "BaseProbe",
    "ProbeError",
    "ZeroPeriodError",
    "FdCountProbe",
    "RssProbe",
    "ExePathProbe",
    "CpuInfoProbe",
    "MemTotalProbe",
    "DisksProbe",
    "CgroupMemoryProbe",
    "CgroupCpuProbe",
    "CpuInfo",
    "DiskInfo",
    "get_all_probes",
    "PROBES",
]
