"""
Pytest fixtures and configuration for procsnap tests.

Provides fake /proc and cgroup v1 trees so probes can be exercised
without depending on the host they run on.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from procsnap.config import Config


# Test Data Fixtures - pseudo-file contents
@pytest.fixture
def sample_status_content():
    """Sample content for /proc/self/status."""
    return """Name:\tpython3
Umask:\t0022
State:\tR (running)
Tgid:\t4242
Pid:\t4242
PPid:\t1
VmPeak:\t   30000 kB
VmSize:\t   29000 kB
VmHWM:\t    9000 kB
VmRSS:\t    4096 kB
RssAnon:\t    2048 kB
Threads:\t1
"""


@pytest.fixture
def sample_cpuinfo_content():
    """Sample content for /proc/cpuinfo (two logical CPUs)."""
    return """processor\t: 0
vendor_id\t: GenuineIntel
cpu family\t: 6
model\t\t: 142
model name\t: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
cpu MHz\t\t: 1992.000

processor\t: 1
vendor_id\t: GenuineIntel
model name\t: Some Other CPU
"""


@pytest.fixture
def sample_meminfo_content():
    """Sample content for /proc/meminfo."""
    return """MemTotal:       16314208 kB
MemFree:         8123456 kB
MemAvailable:   12000000 kB
Buffers:          200000 kB
"""


@pytest.fixture
def sample_mounts_content():
    """Sample content for /proc/mounts."""
    return """/dev/sda1 / ext4 rw,relatime 0 0
proc /proc proc rw,nosuid,nodev,noexec,relatime 0 0
sysfs /sys sysfs rw,nosuid,nodev,noexec,relatime 0 0
cgroup /sys/fs/cgroup/memory cgroup rw,memory 0 0
tmpfs /run tmpfs rw,nosuid,nodev 0 0
"""


def write_proc_tree(
    root: Path,
    status: str,
    cpuinfo: str,
    meminfo: str,
    mounts: str,
    fd_count: int = 3,
) -> Path:
    """Lay out a fake /proc under root and return it."""
    self_dir = root / "self"
    fd_dir = self_dir / "fd"
    fd_dir.mkdir(parents=True)
    for fd in range(fd_count):
        (fd_dir / str(fd)).write_text("")
    (self_dir / "status").write_text(status)
    os.symlink("/usr/bin/python3", self_dir / "exe")
    (root / "cpuinfo").write_text(cpuinfo)
    (root / "meminfo").write_text(meminfo)
    (root / "mounts").write_text(mounts)
    return root


def write_cgroup_tree(
    root: Path,
    limit: str = "536870912\n",
    quota: str = "50000\n",
    period: str = "100000\n",
) -> Path:
    """Lay out a fake cgroup v1 hierarchy under root and return it."""
    (root / "memory").mkdir(parents=True)
    (root / "cpu").mkdir(parents=True)
    (root / "memory" / "memory.limit_in_bytes").write_text(limit)
    (root / "cpu" / "cpu.cfs_quota_us").write_text(quota)
    (root / "cpu" / "cpu.cfs_period_us").write_text(period)
    return root


@pytest.fixture
def fake_proc(
    tmp_path,
    sample_status_content,
    sample_cpuinfo_content,
    sample_meminfo_content,
    sample_mounts_content,
):
    """A fake /proc tree with sample contents."""
    return write_proc_tree(
        tmp_path / "proc",
        status=sample_status_content,
        cpuinfo=sample_cpuinfo_content,
        meminfo=sample_meminfo_content,
        mounts=sample_mounts_content,
    )


@pytest.fixture
def fake_cgroup(tmp_path):
    """A fake cgroup v1 tree: 512 MB memory limit, half a core."""
    return write_cgroup_tree(tmp_path / "cgroup")


@pytest.fixture
def sample_config(fake_proc, fake_cgroup):
    """Config pointing at the fake trees."""
    return Config(proc_root=str(fake_proc), cgroup_root=str(fake_cgroup))


class FakeStatvfs:
    """Minimal stand-in for an os.statvfs_result."""

    def __init__(self, blocks: int, bfree: int, bsize: int = 4096):
        self.f_blocks = blocks
        self.f_bfree = bfree
        self.f_bsize = bsize


@pytest.fixture
def fake_statvfs():
    """statvfs replacement returning 1,000,000 blocks of 4096 bytes, a quarter free."""

    def _statvfs(path):
        return FakeStatvfs(blocks=1_000_000, bfree=250_000)

    return _statvfs


# Pytest Configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "cli: marks tests that drive the command-line interface")
