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

import os
import pathlib
import typing
import unittest.mock
import zipfile

import pytest

import jujucharm
from jujucharm import charm as charm_module

METADATA = """\
name: my-charm
summary: A charm for testing
series:
  - xenial
  - trusty
"""
CONFIG = """\
options:
  port:
    type: int
    default: 8080
"""
METRICS = """\
metrics:
  users:
    type: gauge
    description: Number of users
"""
ACTIONS = """\
backup:
  description: Back up the database
"""

FILES = {
    'metadata.yaml': METADATA,
    'config.yaml': CONFIG,
    'metrics.yaml': METRICS,
    'actions.yaml': ACTIONS,
    'revision': '42\n',
    'version': 'v1.2-dirty\n',
}


def make_charm_dir(root: pathlib.Path, files: typing.Mapping[str, str] = FILES) -> pathlib.Path:
    root.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (root / name).write_text(content)
    return root


def make_charm_archive(
    path: pathlib.Path, files: typing.Mapping[str, str] = FILES
) -> pathlib.Path:
    with zipfile.ZipFile(path, 'w') as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return path


def assert_full_charm(charm: jujucharm.Charm):
    assert charm.meta['name'] == 'my-charm'
    assert charm.meta['series'] == ['xenial', 'trusty']
    assert charm.config['options']['port']['default'] == 8080
    assert charm.metrics['metrics']['users']['type'] == 'gauge'
    assert charm.actions['backup']['description'] == 'Back up the database'
    assert charm.revision == 42
    assert charm.version == 'v1.2-dirty'


def test_read_charm_dir(tmp_path: pathlib.Path):
    charm = jujucharm.read_charm_dir(make_charm_dir(tmp_path / 'my-charm'))
    assert isinstance(charm, jujucharm.CharmDir)
    assert charm.path == tmp_path / 'my-charm'
    assert_full_charm(charm)
    assert charm.supported_series == ['xenial', 'trusty']


def test_read_charm_archive(tmp_path: pathlib.Path):
    charm = jujucharm.read_charm_archive(make_charm_archive(tmp_path / 'my-charm.charm'))
    assert isinstance(charm, jujucharm.CharmArchive)
    assert charm.path == tmp_path / 'my-charm.charm'
    assert_full_charm(charm)


def test_dir_and_archive_agree(tmp_path: pathlib.Path):
    charm_dir = jujucharm.read_charm_dir(make_charm_dir(tmp_path / 'dir'))
    archive = jujucharm.read_charm_archive(make_charm_archive(tmp_path / 'dir.charm'))
    for attr in ('meta', 'config', 'metrics', 'actions', 'revision', 'version'):
        assert getattr(charm_dir, attr) == getattr(archive, attr)


def test_minimal_charm(tmp_path: pathlib.Path):
    charm = jujucharm.read_charm_dir(
        make_charm_dir(tmp_path, {'metadata.yaml': 'name: tiny\n', 'actions.yaml': ''})
    )
    assert charm.meta == {'name': 'tiny'}
    assert charm.config == {}
    assert charm.metrics == {}
    assert charm.actions == {}
    assert charm.revision == 0
    assert charm.version == ''
    assert charm.supported_series == []


def test_charm_is_read_only(tmp_path: pathlib.Path):
    charm = jujucharm.read_charm_dir(make_charm_dir(tmp_path))
    with pytest.raises(TypeError):
        charm.meta['name'] = 'other'  # type: ignore
    with pytest.raises(AttributeError):
        charm.revision = 7  # type: ignore


def test_missing_metadata_dir(tmp_path: pathlib.Path):
    with pytest.raises(FileNotFoundError) as excinfo:
        jujucharm.read_charm_dir(make_charm_dir(tmp_path, {'config.yaml': CONFIG}))
    assert excinfo.value.filename == str(tmp_path / 'metadata.yaml')


def test_missing_metadata_archive(tmp_path: pathlib.Path):
    path = make_charm_archive(tmp_path / 'bad.charm', {'config.yaml': CONFIG})
    with pytest.raises(FileNotFoundError):
        jujucharm.read_charm_archive(path)


def test_single_series_string(tmp_path: pathlib.Path):
    path = make_charm_dir(tmp_path, {'metadata.yaml': 'name: one\nseries: trusty\n'})
    charm = jujucharm.read_charm(path)
    assert charm.supported_series == ['trusty']
    assert jujucharm.series_for_charm('', charm.supported_series) == 'trusty'


@pytest.mark.parametrize('series', ['{trusty: 1}', '[trusty, 16]', '42'])
def test_bad_series(tmp_path: pathlib.Path, series: str):
    path = make_charm_dir(tmp_path, {'metadata.yaml': f'name: bad\nseries: {series}\n'})
    with pytest.raises(TypeError, match='series must be a list'):
        jujucharm.read_charm_dir(path)


def test_version_not_utf8(tmp_path: pathlib.Path):
    path = make_charm_dir(tmp_path, {'metadata.yaml': METADATA})
    (path / 'version').write_bytes(b'v1\xff\n')
    charm = jujucharm.read_charm(path)
    assert charm.version == 'v1\ufffd'


def test_protocol_attributes(tmp_path: pathlib.Path):
    charm: jujucharm.Charm = jujucharm.read_charm(make_charm_dir(tmp_path))
    assert charm.path == tmp_path
    assert charm.supported_series == ['xenial', 'trusty']
    for attr in ('path', 'supported_series', 'version'):
        assert attr in dir(jujucharm.Charm)


def test_bad_revision(tmp_path: pathlib.Path):
    path = make_charm_dir(tmp_path, {'metadata.yaml': METADATA, 'revision': 'lots\n'})
    with pytest.raises(ValueError):
        jujucharm.read_charm_dir(path)


def test_metadata_not_a_mapping(tmp_path: pathlib.Path):
    path = make_charm_dir(tmp_path, {'metadata.yaml': '- just\n- a list\n'})
    with pytest.raises(TypeError, match='metadata.yaml: expected a mapping'):
        jujucharm.read_charm_dir(path)


def test_archive_not_a_zip(tmp_path: pathlib.Path):
    path = tmp_path / 'not-a-charm.charm'
    path.write_text(METADATA)
    with pytest.raises(zipfile.BadZipFile):
        jujucharm.read_charm_archive(path)


class TestReadCharm:
    def test_directory(self, tmp_path: pathlib.Path):
        charm = jujucharm.read_charm(make_charm_dir(tmp_path / 'my-charm'))
        assert isinstance(charm, jujucharm.CharmDir)
        assert_full_charm(charm)

    def test_archive(self, tmp_path: pathlib.Path):
        charm = jujucharm.read_charm(str(make_charm_archive(tmp_path / 'my-charm.charm')))
        assert isinstance(charm, jujucharm.CharmArchive)
        assert_full_charm(charm)

    def test_directory_named_like_archive(self, tmp_path: pathlib.Path):
        charm = jujucharm.read_charm(make_charm_dir(tmp_path / 'looks-like.charm'))
        assert isinstance(charm, jujucharm.CharmDir)

    def test_dispatches_directory(self, tmp_path: pathlib.Path):
        with unittest.mock.patch.object(
            charm_module, 'read_charm_dir'
        ) as read_dir, unittest.mock.patch.object(
            charm_module, 'read_charm_archive'
        ) as read_archive:
            result = jujucharm.read_charm(tmp_path)
        read_dir.assert_called_once_with(tmp_path)
        read_archive.assert_not_called()
        assert result is read_dir.return_value

    def test_dispatches_file(self, tmp_path: pathlib.Path):
        path = tmp_path / 'some-file'
        path.write_bytes(b'')
        with unittest.mock.patch.object(
            charm_module, 'read_charm_dir'
        ) as read_dir, unittest.mock.patch.object(
            charm_module, 'read_charm_archive'
        ) as read_archive:
            result = jujucharm.read_charm(path)
        read_archive.assert_called_once_with(path)
        read_dir.assert_not_called()
        assert result is read_archive.return_value

    def test_missing_path(self, tmp_path: pathlib.Path):
        path = tmp_path / 'nope'
        with unittest.mock.patch.object(
            charm_module, 'read_charm_dir'
        ) as read_dir, unittest.mock.patch.object(
            charm_module, 'read_charm_archive'
        ) as read_archive:
            with pytest.raises(FileNotFoundError) as excinfo:
                jujucharm.read_charm(path)
        assert os.fspath(excinfo.value.filename) == str(path)
        read_dir.assert_not_called()
        read_archive.assert_not_called()

    def test_reader_errors_are_not_wrapped(self, tmp_path: pathlib.Path):
        boom = RuntimeError('boom')
        with unittest.mock.patch.object(charm_module, 'read_charm_dir', side_effect=boom):
            with pytest.raises(RuntimeError) as excinfo:
                jujucharm.read_charm(tmp_path)
        assert excinfo.value is boom


def test_series_from_loaded_charm(tmp_path: pathlib.Path):
    charm = jujucharm.read_charm(make_charm_dir(tmp_path))
    supported = charm.meta.get('series', [])
    assert jujucharm.series_for_charm('', supported) == 'xenial'
    assert jujucharm.series_for_charm('trusty', supported) == 'trusty'
    with pytest.raises(jujucharm.UnsupportedSeriesError):
        jujucharm.series_for_charm('bionic', supported)
