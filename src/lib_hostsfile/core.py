"""Composition root for ``lib_hostsfile``.

Purpose
-------
Provide the entry points that wire configuration adapters, the filesystem
store and the document together. Callers that want a ready-to-use hosts file
only need :func:`load_hostsfile`.

Contents
--------
* :data:`SLUG` / :data:`ENV_PREFIX` – naming used for environment variables.
* :func:`resolve_settings` – environment + platform → :class:`HostsSettings`.
* :func:`open_hostsfile` – build a :class:`HostsFile` for resolved settings.
* :func:`load_hostsfile` – open, load and parse in one call.

System Role
-----------
The hosts file location and layout are resolved exactly once here and
injected into the document; nothing below this module reads the process
environment.
"""

from __future__ import annotations

from typing import Final, Mapping

from .adapters.env.default import DefaultEnvLoader, default_env_prefix
from .adapters.filesystem.default import DefaultFileStore
from .adapters.path_resolvers.default import DefaultPathResolver
from .application.document import HostsFile
from .application.ports import FileStore
from .domain.config import HostsSettings, normalize_layout
from .domain.errors import EntryError
from .observability import bind_trace_id, log_info, make_event

SLUG: Final[str] = "lib-hostsfile"
ENV_PREFIX: Final[str] = default_env_prefix(SLUG)


def resolve_settings(
    *,
    path: str | None = None,
    layout: str | None = None,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> HostsSettings:
    """Resolve the hosts file location and layout.

    Explicit *path* / *layout* arguments win over ``LIB_HOSTSFILE_PATH`` /
    ``LIB_HOSTSFILE_FORMAT``, which win over the platform defaults.

    Raises
    ------
    ConfigError
        When the layout is not a known name or alias.

    Examples
    --------
    >>> resolve_settings(env={"LIB_HOSTSFILE_PATH": "/tmp/hosts"}, platform="linux")
    HostsSettings(path='/tmp/hosts', layout='flat')
    >>> resolve_settings(env={"LIB_HOSTSFILE_FORMAT": "unix"}, platform="linux")
    HostsSettings(path='/etc/hosts', layout='grouped')
    """

    values = DefaultEnvLoader(environ=env).load(ENV_PREFIX)
    resolver = DefaultPathResolver(override=path or values.get("path"), env=env, platform=platform)
    settings = HostsSettings(
        path=resolver.hosts_path(),
        layout=normalize_layout(layout if layout is not None else values.get("format")),
    )
    log_info("settings_resolved", **make_event("config", settings.path, layout=settings.layout))
    return settings


def open_hostsfile(settings: HostsSettings, *, store: FileStore | None = None) -> HostsFile:
    """Return an unloaded :class:`HostsFile` for *settings*."""

    return HostsFile(settings.path, layout=settings.layout, store=store or DefaultFileStore())


def load_hostsfile(
    settings: HostsSettings | None = None,
    *,
    store: FileStore | None = None,
) -> tuple[HostsFile, list[EntryError]]:
    """Open, load and parse the hosts file.

    Returns the document and the non-fatal entry errors found while parsing.
    Read failures propagate as :class:`~lib_hostsfile.domain.errors.ReadError`.
    """

    bind_trace_id(None)
    hostsfile = open_hostsfile(settings or resolve_settings(), store=store)
    hostsfile.load()
    errors = hostsfile.parse()
    return hostsfile, errors


__all__ = [
    "ENV_PREFIX",
    "SLUG",
    "load_hostsfile",
    "open_hostsfile",
    "resolve_settings",
]
