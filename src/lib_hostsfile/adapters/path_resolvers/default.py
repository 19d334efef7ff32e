"""Hosts file path resolution.

Purpose
-------
Implement :class:`lib_hostsfile.application.ports.PathResolver` by
encapsulating the platform conventions for the hosts file location. The
adapter is the only component that knows where operating systems keep the
file; an explicit override (from the environment or the CLI) always wins.
"""

from __future__ import annotations

import os
import sys
from pathlib import PureWindowsPath
from typing import Final, Mapping

from ...observability import log_debug

POSIX_HOSTS_PATH: Final[str] = "/etc/hosts"
_WINDOWS_SYSTEM_ROOT: Final[str] = r"C:\Windows"


class DefaultPathResolver:
    """Resolve the hosts file location for a platform.

    Parameters
    ----------
    override:
        Explicit path; returned verbatim when set.
    env:
        Optional environment mapping (``SystemRoot`` lookups on Windows).
        Defaults to :data:`os.environ`.
    platform:
        Platform identifier (``sys.platform`` clone). Defaults to the current
        interpreter platform.
    """

    def __init__(
        self,
        *,
        override: str | None = None,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        self.override = override
        self.env = os.environ if env is None else env
        self.platform = platform or sys.platform

    def hosts_path(self) -> str:
        """Return the override or the platform default.

        Examples
        --------
        >>> DefaultPathResolver(platform="linux", env={}).hosts_path()
        '/etc/hosts'
        >>> DefaultPathResolver(platform="win32", env={}).hosts_path()
        'C:\\\\Windows\\\\System32\\\\drivers\\\\etc\\\\hosts'
        >>> DefaultPathResolver(override="/tmp/hosts").hosts_path()
        '/tmp/hosts'
        """

        if self.override:
            path = self.override
        elif self._is_windows:
            root = self.env.get("SystemRoot") or self.env.get("SYSTEMROOT") or _WINDOWS_SYSTEM_ROOT
            path = str(PureWindowsPath(root, "System32", "drivers", "etc", "hosts"))
        else:
            path = POSIX_HOSTS_PATH
        log_debug("hosts_path_resolved", stage="config", path=path, platform=self.platform)
        return path

    @property
    def _is_windows(self) -> bool:
        """Return ``True`` when resolving for Windows."""

        return self.platform.startswith("win")
