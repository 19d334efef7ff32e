"""Shared fixtures for hosts file tests.

``create_hosts_sandbox`` copies a fixture hosts file into a temporary
directory and prepares the environment mapping that points
``LIB_HOSTSFILE_PATH`` at it, so CLI and composition-root tests never touch
the real ``/etc/hosts``. :class:`MemoryStore` is an in-memory
``FileStore`` that records writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

UBUNTU_HOSTS = """127.0.0.1\tlocalhost
127.0.1.1\tubuntu
127.0.0.1 myapp.local
192.168.0.30 raspberrypi

# The following lines are desirable for IPv6 capable hosts
::1     ip6-localhost ip6-loopback
fe00::0 ip6-localnet
ff00::0 ip6-mcastprefix
ff02::1 ip6-allnodes
ff02::2 ip6-allrouters
"""

CONFLICTING_HOSTS = """127.0.0.1 localhost kubernetes.docker.internal
::1 localhost
127.0.0.1 kubernetes.docker.internal
10.0.0.9 kubernetes.docker.internal
"""


@dataclass
class HostsSandbox:
    """A temporary hosts file plus the environment that selects it."""

    path: Path
    env: dict[str, str] = field(default_factory=dict)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write(self, content: str) -> None:
        self.path.write_text(content, encoding="utf-8")

    def apply_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Export the sandbox environment for code that reads ``os.environ``."""

        monkeypatch.delenv("LIB_HOSTSFILE_FORMAT", raising=False)
        for key, value in self.env.items():
            monkeypatch.setenv(key, value)


def create_hosts_sandbox(tmp_path: Path, content: str = UBUNTU_HOSTS, *, layout: str | None = None) -> HostsSandbox:
    path = tmp_path / "hosts"
    path.write_text(content, encoding="utf-8")
    env = {"LIB_HOSTSFILE_PATH": str(path), "LIB_HOSTSFILE_FORMAT": layout or ""}
    return HostsSandbox(path=path, env=env)


class MemoryStore:
    """``FileStore`` keeping files in a dict and counting writes."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files = dict(files or {})
        self.writes = 0

    def read(self, path: str) -> bytes:
        return self.files[path]

    def write(self, path: str, data: bytes) -> None:
        self.writes += 1
        self.files[path] = data


__all__ = [
    "CONFLICTING_HOSTS",
    "HostsSandbox",
    "MemoryStore",
    "UBUNTU_HOSTS",
    "create_hosts_sandbox",
]
