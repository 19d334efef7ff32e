"""CLI adapter for ``lib_hostsfile`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose hosts file management as a command line tool so operators can add,
remove, toggle, list, format, export and import entries without writing
Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command holding the options shared by every subcommand
  (traceback handling, hosts path and layout, preview, force, address family).
* ``add`` / ``rm`` / ``on`` / ``off`` / ``has`` – single-domain workflows.
* ``ls`` / ``fmt`` / ``dump`` / ``apply`` – whole-file workflows.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root
(:func:`lib_hostsfile.core.load_hostsfile`) and the merge policy, and turns
every :class:`~lib_hostsfile.domain.errors.HostsError` into a
:class:`click.ClickException` so expected failures exit with ``1`` and a
one-line message. ``lib_cli_exit_tools`` handles everything else.
"""

from __future__ import annotations

import functools
import json
import sys
from importlib import metadata
from typing import Any, Callable, Final, Optional, Sequence, TypeVar

import lib_cli_exit_tools
import rich_click as click

from .adapters.file_loaders.structured import loader_for
from .application.document import HostsFile
from .application.merge import ADDED, add_or_update, apply_records, checked_entry
from .core import load_hostsfile, resolve_settings
from .domain.errors import HostsError, NotFound, ParseErrors

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

PROG_NAME: Final[str] = "lib_hostsfile"
FORMAT_CHOICES: Final[tuple[str, ...]] = ("flat", "grouped", "windows", "unix")

_F = TypeVar("_F", bound=Callable[..., Any])


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version(PROG_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Manage entries in the system hosts file",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=PROG_NAME,
    message=f"{PROG_NAME} version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--path",
    "path",
    default=None,
    help="Hosts file to operate on (default: $LIB_HOSTSFILE_PATH or the platform hosts file)",
)
@click.option(
    "--format",
    "layout",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Output layout: one entry per line (flat) or one line per address (grouped)",
)
@click.option("-n", "--preview", is_flag=True, default=False, help="Print the resulting hosts file instead of saving it")
@click.option("-f", "--force", is_flag=True, default=False, help="Proceed even if the hosts file has parse errors")
@click.option("-4", "ipv4", is_flag=True, default=False, help="Limit the operation to IPv4 entries")
@click.option("-6", "ipv6", is_flag=True, default=False, help="Limit the operation to IPv6 entries")
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    path: Optional[str],
    layout: Optional[str],
    preview: bool,
    force: bool,
    ipv4: bool,
    ipv6: bool,
) -> None:
    """Root command storing the shared options for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj.update(
        traceback=traceback,
        path=path,
        layout=layout,
        preview=preview,
        force=force,
        versions=_selected_versions(ipv4, ipv6),
    )
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


def _selected_versions(ipv4: bool, ipv6: bool) -> tuple[int, ...]:
    """Return the address families selected by ``-4`` / ``-6`` (both when neither is given).

    Examples
    --------
    >>> _selected_versions(False, False), _selected_versions(True, False), _selected_versions(False, True)
    ((4, 6), (4,), (6,))
    """

    if ipv4 == ipv6:
        return (4, 6)
    return (4,) if ipv4 else (6,)


def _reports_hosts_errors(func: _F) -> _F:
    """Translate :class:`HostsError` into :class:`click.ClickException` (exit code 1)."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HostsError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper  # type: ignore[return-value]


def _load(ctx: click.Context, *, gate: bool = True) -> HostsFile:
    """Load and parse the hosts file selected by the group options.

    With *gate* on and ``--force`` off, parse errors are printed to stderr and
    :class:`ParseErrors` is raised. Without the gate they are printed as
    warnings and the command continues.
    """

    options = ctx.obj
    settings = resolve_settings(path=options["path"], layout=options["layout"])
    hostsfile, errors = load_hostsfile(settings)
    for error in errors:
        click.echo(str(error), err=True)
    if errors and gate and not options["force"]:
        raise ParseErrors(f"Errors while parsing hostsfile. Try {PROG_NAME} fmt", errors)
    return hostsfile


def _save_or_preview(ctx: click.Context, hostsfile: HostsFile) -> None:
    """Print the canonical file with ``-n``, otherwise write it back."""

    if ctx.obj["preview"]:
        click.echo(hostsfile.format().decode("utf-8"), nl=False)
        return
    hostsfile.save()


def _contains(hostsfile: HostsFile, domain: str, versions: Sequence[int]) -> bool:
    return any(hostsfile.hosts.contains_domain(domain, version) for version in versions)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(PROG_NAME)
    except metadata.PackageNotFoundError:
        click.echo(f"{PROG_NAME} (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', PROG_NAME)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")
    for entry in meta.get_all("Project-URL") or []:
        click.echo(f"  {entry}")


@cli.command("add", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("domain")
@click.argument("ip")
@click.pass_context
@_reports_hosts_errors
def cli_add(ctx: click.Context, domain: str, ip: str) -> None:
    """Add DOMAIN pointing at IP, replacing its previous address of the same family.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["--path", "/dev/null", "-n", "add", "example.test", "bogus"])
    >>> result.exit_code, "not a valid IP address" in result.output
    (1, True)
    """

    entry = checked_entry(domain, ip)
    hostsfile = _load(ctx)
    outcome = add_or_update(hostsfile.hosts, entry)
    _save_or_preview(ctx, hostsfile)
    if not ctx.obj["preview"]:
        verb = "Added" if outcome == ADDED else "Updated"
        click.echo(f"{verb} {entry.format_human()}")


@cli.command("rm", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("domain")
@click.pass_context
@_reports_hosts_errors
def cli_rm(ctx: click.Context, domain: str) -> None:
    """Delete DOMAIN (both families unless ``-4`` or ``-6`` is given)."""

    hostsfile = _load(ctx)
    versions = ctx.obj["versions"]
    if not _contains(hostsfile, domain, versions):
        click.echo(f"{domain} not found in {hostsfile.path}")
        return
    for version in versions:
        hostsfile.hosts.remove_domain_v(domain, version)
    _save_or_preview(ctx, hostsfile)
    if not ctx.obj["preview"]:
        click.echo(f"Deleted {domain}")


@cli.command("on", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("domain")
@click.pass_context
@_reports_hosts_errors
def cli_on(ctx: click.Context, domain: str) -> None:
    """Enable (uncomment) DOMAIN."""

    _toggle(ctx, domain, enabled=True)


@cli.command("off", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("domain")
@click.pass_context
@_reports_hosts_errors
def cli_off(ctx: click.Context, domain: str) -> None:
    """Disable (comment out) DOMAIN."""

    _toggle(ctx, domain, enabled=False)


def _toggle(ctx: click.Context, domain: str, *, enabled: bool) -> None:
    hostsfile = _load(ctx)
    versions = ctx.obj["versions"]
    if not _contains(hostsfile, domain, versions):
        raise NotFound(f"{domain} not found in {hostsfile.path}")
    for version in versions:
        if enabled:
            hostsfile.hosts.enable_v(domain, version)
        else:
            hostsfile.hosts.disable_v(domain, version)
    _save_or_preview(ctx, hostsfile)
    if not ctx.obj["preview"]:
        click.echo(f"{'Enabled' if enabled else 'Disabled'} {domain}")


@cli.command("has", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("domain")
@click.pass_context
@_reports_hosts_errors
def cli_has(ctx: click.Context, domain: str) -> None:
    """Exit 0 when DOMAIN is in the hosts file, 1 otherwise."""

    hostsfile = _load(ctx)
    if not _contains(hostsfile, domain, ctx.obj["versions"]):
        raise NotFound(f"{domain} not found in {hostsfile.path}")
    click.echo(f"Found {domain} in {hostsfile.path}")


@cli.command("ls", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
@_reports_hosts_errors
def cli_ls(ctx: click.Context) -> None:
    """List entries as ``domain -> ip (On|Off)`` in canonical order."""

    hostsfile = _load(ctx, gate=False)
    hostsfile.hosts.sort()
    entries = [entry for entry in hostsfile.hosts if entry.version in ctx.obj["versions"]]
    domain_width = max((len(entry.domain) for entry in entries), default=0)
    ip_width = max((len(entry.ip) for entry in entries), default=0)
    for entry in entries:
        click.echo(f"{entry.domain.ljust(domain_width)} -> {entry.ip.ljust(ip_width)} {entry.format_enabled()}")


@cli.command("fmt", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
@_reports_hosts_errors
def cli_fmt(ctx: click.Context) -> None:
    """Rewrite the hosts file in canonical form, dropping duplicates and conflicts."""

    hostsfile = _load(ctx, gate=False)
    if hostsfile.is_canonical():
        click.echo(f"{hostsfile.path} is already formatted and contains no dupes or conflicts; nothing to do")
        return
    _save_or_preview(ctx, hostsfile)


@cli.command("dump", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indent size")
@click.pass_context
@_reports_hosts_errors
def cli_dump(ctx: click.Context, indent: int) -> None:
    """Print the entries as a JSON array of ``{domain, ip, enabled}`` records."""

    hostsfile = _load(ctx, gate=False)
    hostsfile.hosts.sort()
    click.echo(hostsfile.hosts.dump(indent=indent))


@cli.command("apply", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source")
@click.pass_context
@_reports_hosts_errors
def cli_apply(ctx: click.Context, source: str) -> None:
    """Merge the records in SOURCE (JSON, or YAML by suffix) into the hosts file."""

    records = loader_for(source).load(source)
    hostsfile = _load(ctx, gate=False)
    report = apply_records(hostsfile.hosts, records)
    _save_or_preview(ctx, hostsfile)
    if not ctx.obj["preview"]:
        click.echo(f"{source} applied")
        click.echo(json.dumps({"added": report.added, "updated": report.updated, "unchanged": report.unchanged}))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=PROG_NAME,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
