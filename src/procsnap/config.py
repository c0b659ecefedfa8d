"""
Configuration management for procsnap.

Supports configuration via YAML files and programmatic access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = [
    Path("/etc/procsnap/config.yaml"),
    Path.home() / ".config" / "procsnap" / "config.yaml",
    Path("procsnap.yaml"),
]


@dataclass
class Config:
    """
    Configuration container for procsnap.

    Priority (highest to lowest):
    1. Programmatic values passed to __init__
    2. Config file values
    3. Default values
    """

    # Data source roots
    proc_root: str = "/proc"
    cgroup_root: str = "/sys/fs/cgroup"

    # Collection settings
    fatal_probes: list[str] = field(default_factory=lambda: ["fd_count", "rss"])
    excluded_fstypes: list[str] = field(default_factory=lambda: ["proc", "sysfs", "cgroup"])
    report_cgroup: bool = True

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary."""
        # Flatten nested sections, e.g. logging.level -> log_level
        flat = {}
        for key, value in data.items():
            if isinstance(value, dict):
                for subkey, subvalue in value.items():
                    flat[_SECTION_ALIASES.get((key, subkey), subkey)] = subvalue
            else:
                flat[key] = value

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in flat.items() if k in known_fields}

        return cls(**filtered)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """
        Load configuration with full resolution order.

        Args:
            config_path: Explicit path to config file. If None, searches
                        default locations.

        Returns:
            Fully resolved Config instance.
        """
        if config_path:
            return cls.from_file(config_path)

        for path in DEFAULT_CONFIG_PATHS:
            if path.exists():
                return cls.from_file(path)

        return cls()

    def is_fatal(self, probe_name: str) -> bool:
        """Whether a failure of the named probe aborts the whole run."""
        return probe_name in self.fatal_probes

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "paths": {
                "proc_root": self.proc_root,
                "cgroup_root": self.cgroup_root,
            },
            "collection": {
                "fatal_probes": self.fatal_probes,
                "excluded_fstypes": self.excluded_fstypes,
                "report_cgroup": self.report_cgroup,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
            },
        }


# Nested keys whose flattened name differs from the dataclass field
_SECTION_ALIASES = {
    ("logging", "level"): "log_level",
    ("logging", "file"): "log_file",
}
