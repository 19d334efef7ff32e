"""Structured record file loaders.

Purpose
-------
Convert bulk import files (as written by ``dump``) into lists of hosts
records the merge policy understands. The adapters are small wrappers around
``json`` / ``yaml.safe_load`` so error handling and observability live in one
place.

Contents
--------
* :class:`BaseFileLoader` – shared helpers for reading files and validating
  the list-of-objects shape.
* :class:`JSONFileLoader` – loader for the canonical JSON export.
* :class:`YAMLFileLoader` – optional YAML loader (only available when PyYAML is
  installed).
* :func:`loader_for` – pick a loader from the file suffix.

System Role
-----------
Invoked by the CLI ``apply`` command before
:func:`lib_hostsfile.application.merge.apply_records` validates each record.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error

try:
    import yaml  # type: ignore[import-not-found]
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    yaml = None  # type: ignore[assignment]


class BaseFileLoader:
    """Common utilities shared by the structured file loaders."""

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when the file is missing."""

        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Unable to read {path}: file not found")
        payload = file_path.read_bytes()
        log_debug("records_file_read", stage="apply", path=path, size=len(payload))
        return payload

    @staticmethod
    def _ensure_records(data: object, *, path: str) -> Sequence[Mapping[str, object]]:
        """Ensure *data* is a list of mappings, otherwise raise ``InvalidFormat``.

        Field-level validation is left to the merge policy.

        Examples
        --------
        >>> BaseFileLoader._ensure_records([{"domain": "a"}], path="demo")
        [{'domain': 'a'}]
        >>> BaseFileLoader._ensure_records({"domain": "a"}, path="demo")
        Traceback (most recent call last):
        ...
        lib_hostsfile.domain.errors.InvalidFormat: File demo did not produce a list of records
        """

        if not isinstance(data, list) or not all(isinstance(item, Mapping) for item in data):
            raise InvalidFormat(f"File {path} did not produce a list of records")
        return data


class JSONFileLoader(BaseFileLoader):
    """Load JSON record files."""

    def load(self, path: str) -> Sequence[Mapping[str, object]]:
        """Return the records stored in the JSON file at *path*.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', delete=False, encoding='utf-8')
        >>> _ = tmp.write('[{"domain": "a", "ip": "10.0.0.1", "enabled": true}]')
        >>> tmp.close()
        >>> JSONFileLoader().load(tmp.name)[0]["ip"]
        '10.0.0.1'
        >>> Path(tmp.name).unlink()
        """

        try:
            data = json.loads(self._read(path))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log_error("records_file_invalid", stage="apply", path=path, format="json", error=str(exc))
            raise InvalidFormat(f"Invalid JSON in {path}: {exc}") from exc
        records = self._ensure_records(data, path=path)
        log_debug("records_loaded", stage="apply", path=path, format="json", count=len(records))
        return records


class YAMLFileLoader(BaseFileLoader):
    """Load YAML record files when PyYAML is available."""

    def load(self, path: str) -> Sequence[Mapping[str, object]]:
        """Return the records stored in the YAML file at *path*.

        Raises
        ------
        NotFound
            When PyYAML is not installed.
        """

        if yaml is None:
            raise NotFound("PyYAML is required for YAML record files")
        try:
            data = yaml.safe_load(self._read(path))  # type: ignore[operator]
        except yaml.YAMLError as exc:  # type: ignore[attr-defined]
            log_error("records_file_invalid", stage="apply", path=path, format="yaml", error=str(exc))
            raise InvalidFormat(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = []
        records = self._ensure_records(data, path=path)
        log_debug("records_loaded", stage="apply", path=path, format="yaml", count=len(records))
        return records


def loader_for(path: str) -> BaseFileLoader:
    """Return the loader matching the suffix of *path* (JSON by default).

    Examples
    --------
    >>> type(loader_for("hosts.yml")).__name__, type(loader_for("hosts.json")).__name__
    ('YAMLFileLoader', 'JSONFileLoader')
    """

    if Path(path).suffix.lower() in (".yaml", ".yml"):
        return YAMLFileLoader()
    return JSONFileLoader()
