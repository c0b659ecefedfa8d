"""
Core orchestration module for procsnap.

Runs every probe once, applies the severity policy, and aggregates the
results into a SystemSnapshot.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from procsnap.config import Config
from procsnap.probes import CpuInfo, DiskInfo, ProbeError, get_all_probes

logger = logging.getLogger(__name__)


class FatalProbeError(Exception):
    """A probe marked fatal failed; no snapshot is produced."""

    def __init__(self, probe: str, error: Exception):
        super().__init__(f"Probe '{probe}' failed: {error}")
        self.probe = probe
        self.error = error


@dataclass(frozen=True)
class CgroupLimits:
    """
    Cgroup v1 resource ceilings.

    None means no limit was reported: either the kernel says unlimited or
    the control file could not be read. SystemSnapshot.errors tells the two
    apart.
    """

    memory_limit_bytes: int | None = None
    cpu_limit_cores: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Absent limits are left out rather than written as null."""
        data: dict[str, Any] = {}
        if self.memory_limit_bytes is not None:
            data["memory_limit_bytes"] = self.memory_limit_bytes
        if self.cpu_limit_cores is not None:
            data["cpu_limit_cores"] = self.cpu_limit_cores
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CgroupLimits:
        return cls(
            memory_limit_bytes=data.get("memory_limit_bytes"),
            cpu_limit_cores=data.get("cpu_limit_cores"),
        )


@dataclass(frozen=True)
class SystemSnapshot:
    """Process and host resource state captured by one run."""

    fd_count: int = 0
    # VmRSS as read from /proc/self/status, in kB; the key name is historical
    vmrss_bytes: int = 0
    exe_path: str = ""
    cpu_model: str = ""
    cpu_cores: int = 0
    mem_total_kb: int = 0
    mounts: list[DiskInfo] = field(default_factory=list)
    cgroup_v1: CgroupLimits | None = None
    # Non-fatal probe failures by probe name; not serialized
    errors: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert snapshot to dictionary for serialization."""
        data: dict[str, Any] = {
            "fd_count": self.fd_count,
            "vmrss_bytes": self.vmrss_bytes,
            "exe_path": self.exe_path,
            "cpu_model": self.cpu_model,
            "cpu_cores": self.cpu_cores,
            "mem_total_kb": self.mem_total_kb,
            "mounts": [
                {
                    "mountpoint": d.mountpoint,
                    "fstype": d.fstype,
                    "total": d.total,
                    "free": d.free,
                }
                for d in self.mounts
            ],
        }
        if self.cgroup_v1 is not None:
            data["cgroup_v1"] = self.cgroup_v1.to_dict()
        return data

    def to_json(self, indent: int = 2) -> str:
        """
        Serialize snapshot to JSON string.

        Raises:
            ValueError: If a value has no JSON form, such as an infinite
                CPU limit.
        """
        return json.dumps(self.to_dict(), indent=indent, allow_nan=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SystemSnapshot:
        """Rebuild a snapshot from its dictionary form."""
        cgroup = data.get("cgroup_v1")
        return cls(
            fd_count=data["fd_count"],
            vmrss_bytes=data["vmrss_bytes"],
            exe_path=data["exe_path"],
            cpu_model=data["cpu_model"],
            cpu_cores=data["cpu_cores"],
            mem_total_kb=data["mem_total_kb"],
            mounts=[DiskInfo(**m) for m in data.get("mounts") or []],
            cgroup_v1=CgroupLimits.from_dict(cgroup) if cgroup is not None else None,
        )


class SnapshotCollector:
    """
    Runs all probes and aggregates their results.

    Probes listed in ``Config.fatal_probes`` abort the run when they fail.
    Any other failure is logged and recorded in ``SystemSnapshot.errors``,
    and the field keeps its zero value.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.probes = get_all_probes()

    def collect(self) -> SystemSnapshot:
        """
        Run every probe once, in registry order.

        Returns:
            The aggregated SystemSnapshot.

        Raises:
            FatalProbeError: If a fatal probe fails.
        """
        logger.debug(f"Running {len(self.probes)} probes")

        results: dict[str, Any] = {}
        errors: dict[str, str] = {}

        for name, probe_cls in self.probes.items():
            try:
                results[name] = probe_cls(self.config).collect()
            except (OSError, ValueError, ProbeError) as e:
                if self.config.is_fatal(name):
                    raise FatalProbeError(name, e) from e
                errors[name] = str(e)
                logger.error(f"Probe '{name}' failed: {e}")

        cpu: CpuInfo = results.get("cpu_info", CpuInfo(model="", cores=0))

        cgroup = None
        if self.config.report_cgroup:
            cgroup = CgroupLimits(
                memory_limit_bytes=results.get("cgroup_memory"),
                cpu_limit_cores=results.get("cgroup_cpu"),
            )

        return SystemSnapshot(
            fd_count=results.get("fd_count", 0),
            vmrss_bytes=results.get("rss", 0),
            exe_path=results.get("exe_path", ""),
            cpu_model=cpu.model,
            cpu_cores=cpu.cores,
            mem_total_kb=results.get("mem_total", 0),
            mounts=results.get("disks", []),
            cgroup_v1=cgroup,
            errors=errors,
        )
