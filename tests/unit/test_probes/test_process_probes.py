"""
Unit tests for the process probes.

Tests descriptor counting, VmRSS parsing, and executable path resolution.
"""

from __future__ import annotations

import os

import pytest

from procsnap.config import Config
from procsnap.probes.base import ProbeError
from procsnap.probes.process import ExePathProbe, FdCountProbe, RssProbe


class TestFdCountProbe:
    """Test FdCountProbe."""

    def test_counts_entries(self, sample_config):
        assert FdCountProbe(sample_config).collect() == 3

    def test_missing_directory_raises(self, tmp_path):
        config = Config(proc_root=str(tmp_path))
        with pytest.raises(OSError):
            FdCountProbe(config).collect()

    def test_real_proc(self):
        """Test against the live /proc of the test process."""
        if not os.path.isdir("/proc/self/fd"):
            pytest.skip("no /proc on this host")
        assert FdCountProbe().collect() > 0


class TestRssProbe:
    """Test RssProbe."""

    def test_parses_vmrss(self, sample_config):
        assert RssProbe(sample_config).collect() == 4096

    def test_position_independent(self, sample_config, fake_proc):
        (fake_proc / "self" / "status").write_text("VmRSS:  123 kB\nName:\tx\nState:\tS\n")
        assert RssProbe(sample_config).collect() == 123

    def test_first_match_wins(self, sample_config, fake_proc):
        (fake_proc / "self" / "status").write_text("VmRSS: 10 kB\nVmRSS: 20 kB\n")
        assert RssProbe(sample_config).collect() == 10

    def test_not_found(self, sample_config, fake_proc):
        (fake_proc / "self" / "status").write_text("Name:\tx\nVmSize:\t100 kB\n")
        with pytest.raises(ProbeError, match="VmRSS not found"):
            RssProbe(sample_config).collect()

    def test_prefix_must_be_at_line_start(self, sample_config, fake_proc):
        (fake_proc / "self" / "status").write_text("  VmRSS: 10 kB\n")
        with pytest.raises(ProbeError):
            RssProbe(sample_config).collect()

    def test_unreadable_raises_oserror(self, tmp_path):
        config = Config(proc_root=str(tmp_path))
        with pytest.raises(OSError):
            RssProbe(config).collect()


class TestExePathProbe:
    """Test ExePathProbe."""

    def test_resolves_link(self, sample_config):
        assert ExePathProbe(sample_config).collect() == "/usr/bin/python3"

    def test_missing_link_raises(self, sample_config, fake_proc):
        (fake_proc / "self" / "exe").unlink()
        with pytest.raises(OSError):
            ExePathProbe(sample_config).collect()

    def test_not_a_link_raises(self, sample_config, fake_proc):
        (fake_proc / "self" / "exe").unlink()
        (fake_proc / "self" / "exe").write_text("")
        with pytest.raises(OSError):
            ExePathProbe(sample_config).collect()
