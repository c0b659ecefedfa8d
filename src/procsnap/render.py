"""
Table rendering for procsnap.

Lays a SystemSnapshot out as aligned rich tables. JSON output lives on
SystemSnapshot.to_json.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from procsnap.core import SystemSnapshot

MB = 1024 * 1024


def human_mb(size: int) -> str:
    """Whole megabytes, truncated."""
    return f"{size // MB} MB"


def _grid() -> Table:
    table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 2))
    table.add_column(no_wrap=True)
    table.add_column(no_wrap=True, overflow="ignore")
    return table


def render_table(snapshot: SystemSnapshot, console: Console) -> None:
    """
    Print the snapshot as key/value rows followed by a mounts table.

    Rows never wrap; pass a console wide enough for the longest path.
    """
    summary = _grid()
    summary.add_row("FDs count:", str(snapshot.fd_count))
    summary.add_row("VmRSS:", f"{snapshot.vmrss_bytes} B")
    summary.add_row("EXE path:", escape(snapshot.exe_path))
    summary.add_row("CPU model:", escape(snapshot.cpu_model))
    summary.add_row("CPU cores:", str(snapshot.cpu_cores))
    summary.add_row("MemTotal:", f"{snapshot.mem_total_kb} kB")

    cgroup = snapshot.cgroup_v1
    if cgroup is not None:
        if cgroup.memory_limit_bytes is None:
            summary.add_row("Cgroup (v1) MemLimit:", "unlimited")
        else:
            summary.add_row("Cgroup (v1) MemLimit:", human_mb(cgroup.memory_limit_bytes))
        if cgroup.cpu_limit_cores is None:
            summary.add_row("Cgroup (v1) CPULimit:", "unlimited")
        else:
            summary.add_row("Cgroup (v1) CPULimit:", f"{cgroup.cpu_limit_cores:.2f} cores")

    console.print(summary)
    console.print()

    count = _grid()
    count.add_row("Mounts count:", str(len(snapshot.mounts)))
    console.print(count)
    console.print()

    mounts = Table(box=None, pad_edge=False, padding=(0, 2))
    mounts.add_column("Mount:", no_wrap=True, overflow="ignore")
    mounts.add_column("FS:", no_wrap=True)
    mounts.add_column("Total:", no_wrap=True)
    mounts.add_column("Free:", no_wrap=True)
    for disk in snapshot.mounts:
        mounts.add_row(
            escape(disk.mountpoint),
            escape(disk.fstype),
            human_mb(disk.total),
            human_mb(disk.free),
        )
    console.print(mounts)
