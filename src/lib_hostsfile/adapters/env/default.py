"""Environment variable adapter.

Purpose
-------
Collect the environment variables that configure ``lib_hostsfile``. Only
variables carrying the package prefix are captured, so unrelated settings in
the process environment never leak into the resolved configuration.

Key behaviours
--------------
* Enforces a configurable prefix (``default_env_prefix``).
* Keys are returned lower-cased with the prefix removed
  (``LIB_HOSTSFILE_PATH`` → ``path``).
* Empty values are ignored so ``LIB_HOSTSFILE_PATH=`` means "use the default".
"""

from __future__ import annotations

import os
from typing import Mapping

from ...observability import log_debug


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('lib-hostsfile')
    'LIB_HOSTSFILE'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the configuration namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str) -> dict[str, str]:
        """Return the non-empty variables starting with *prefix*.

        Examples
        --------
        >>> env = {'LIB_HOSTSFILE_PATH': '/tmp/hosts', 'LIB_HOSTSFILE_FORMAT': '', 'HOME': '/root'}
        >>> DefaultEnvLoader(environ=env).load('LIB_HOSTSFILE')
        {'path': '/tmp/hosts'}
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, str] = {}
        for key, value in self._environ.items():
            if not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :]
            if not stripped or not value.strip():
                continue
            collected[stripped.lower()] = value
        log_debug("env_variables_loaded", stage="config", path=None, keys=sorted(collected))
        return collected
