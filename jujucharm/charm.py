# Copyright 2026 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Read a charm from disk, whether it is a directory or a packed archive."""

from __future__ import annotations

import dataclasses
import errno
import logging
import os
import pathlib
import stat
import types
import zipfile
from typing import Any, Callable, Mapping, Optional, Protocol, Type, TypeVar, Union

from ._private import yaml

__all__ = (
    'Charm',
    'CharmArchive',
    'CharmDir',
    'read_charm',
    'read_charm_archive',
    'read_charm_dir',
)

logger = logging.getLogger(__name__)

_PathLike = Union[str, 'os.PathLike[str]']
_C = TypeVar('_C', bound='_CharmContents')


class Charm(Protocol):
    """Anything that can be handled as a charm.

    :func:`read_charm` returns either a :class:`CharmDir` or a :class:`CharmArchive`,
    and both provide this interface. The mappings are the parsed YAML files of
    the charm; their schema is not checked here.
    """

    @property
    def meta(self) -> Mapping[str, Any]:
        """The contents of ``metadata.yaml``."""
        ...

    @property
    def config(self) -> Mapping[str, Any]:
        """The contents of ``config.yaml``, or an empty mapping."""
        ...

    @property
    def metrics(self) -> Mapping[str, Any]:
        """The contents of ``metrics.yaml``, or an empty mapping."""
        ...

    @property
    def actions(self) -> Mapping[str, Any]:
        """The contents of ``actions.yaml``, or an empty mapping."""
        ...

    @property
    def revision(self) -> int:
        """The charm revision, from the ``revision`` file, or 0."""
        ...

    @property
    def version(self) -> str:
        """The stamped ``version`` of the charm, or ''."""
        ...

    @property
    def path(self) -> pathlib.Path:
        """Where the charm was read from."""
        ...

    @property
    def supported_series(self) -> list[str]:
        """The series the charm declares in its metadata, default first."""
        ...


def _series_list(meta: Mapping[str, Any]) -> list[str]:
    series = meta.get('series')
    if not series:
        return []
    # A single series may be written as a plain string.
    if isinstance(series, str):
        return [series]
    if not isinstance(series, list) or not all(isinstance(s, str) for s in series):
        raise TypeError('metadata.yaml: series must be a list of strings')
    return list(series)


@dataclasses.dataclass(frozen=True)
class _CharmContents:
    path: pathlib.Path
    """Where the charm was read from."""

    meta: Mapping[str, Any]
    """The contents of ``metadata.yaml``."""

    config: Mapping[str, Any]
    """The contents of ``config.yaml``, or an empty mapping."""

    metrics: Mapping[str, Any]
    """The contents of ``metrics.yaml``, or an empty mapping."""

    actions: Mapping[str, Any]
    """The contents of ``actions.yaml``, or an empty mapping."""

    revision: int = 0
    """The charm revision, from the ``revision`` file, or 0."""

    version: str = ''
    """The content of the ``version`` file written when the charm was stamped, or ''."""

    @property
    def supported_series(self) -> list[str]:
        """The series the charm declares in its metadata, default first."""
        return _series_list(self.meta)

    @classmethod
    def _from_files(
        cls: Type[_C], path: pathlib.Path, read: Callable[[str], Optional[bytes]]
    ) -> _C:
        raw_meta = read('metadata.yaml')
        if raw_meta is None:
            raise FileNotFoundError(
                errno.ENOENT, 'charm has no metadata.yaml', str(path / 'metadata.yaml')
            )

        def mapping(name: str) -> Mapping[str, Any]:
            raw = read(name)
            data = {} if raw is None else yaml.load_mapping(raw, name)
            return types.MappingProxyType(data)

        raw_revision = read('revision')
        revision = 0 if raw_revision is None else int(raw_revision.decode().strip())
        raw_version = read('version')
        version = '' if raw_version is None else raw_version.decode(errors='replace').strip()

        meta = yaml.load_mapping(raw_meta, 'metadata.yaml')
        _series_list(meta)

        return cls(
            path=path,
            meta=types.MappingProxyType(meta),
            config=mapping('config.yaml'),
            metrics=mapping('metrics.yaml'),
            actions=mapping('actions.yaml'),
            revision=revision,
            version=version,
        )


class CharmDir(_CharmContents):
    """A charm expanded into a directory."""


class CharmArchive(_CharmContents):
    """A charm packed into a zip archive (a ``.charm`` file)."""


def read_charm_dir(path: _PathLike) -> CharmDir:
    """Read the charm expanded in the directory at path.

    Raises:
        FileNotFoundError: the directory has no ``metadata.yaml``.
    """
    root = pathlib.Path(path)

    def read(name: str) -> Optional[bytes]:
        try:
            return (root / name).read_bytes()
        except FileNotFoundError:
            return None

    charm = CharmDir._from_files(root, read)
    logger.debug('Read charm directory %s (revision %d)', root, charm.revision)
    return charm


def read_charm_archive(path: _PathLike) -> CharmArchive:
    """Read the charm packed in the zip archive at path.

    Raises:
        zipfile.BadZipFile: path is not a zip archive.
        FileNotFoundError: the archive has no ``metadata.yaml``.
    """
    archive_path = pathlib.Path(path)
    with zipfile.ZipFile(archive_path) as zf:

        def read(name: str) -> Optional[bytes]:
            try:
                return zf.read(name)
            except KeyError:
                return None

        charm = CharmArchive._from_files(archive_path, read)
    logger.debug('Read charm archive %s (revision %d)', archive_path, charm.revision)
    return charm


def read_charm(path: _PathLike) -> Charm:
    """Read a charm from path, which can be a charm directory or a charm archive.

    Directories are read with :func:`read_charm_dir`, and anything else with
    :func:`read_charm_archive`. The choice depends only on what ``os.stat``
    reports, never on the name of the path.

    Errors from ``os.stat`` or from the reader are raised unchanged.
    """
    info = os.stat(path)
    if stat.S_ISDIR(info.st_mode):
        return read_charm_dir(path)
    return read_charm_archive(path)
