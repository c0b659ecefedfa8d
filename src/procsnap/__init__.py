"""
procsnap - Point-in-time process and host resource snapshot for Linux.

Reads a handful of /proc and cgroup v1 pseudo-files once and reports
descriptor count, memory, CPU, mounts and cgroup limits as a table or JSON.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
