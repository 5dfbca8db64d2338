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

"""Load charms, choose the series to deploy them to, and stamp their version.

- :func:`read_charm` reads a charm from a directory or a packed archive and
  returns a :class:`Charm`.
- :func:`series_for_charm` picks the series for a deployment from the series
  that was requested and the series the charm supports.
- :func:`maybe_create_version_file` writes a ``version`` file into a charm
  source tree, using git, bzr or hg to describe the current revision.
"""

# The "from .X import Y" imports below don't explicitly tell Pyright (or MyPy)
# that those symbols are part of the public API, so we have to add __all__.
__all__ = [  # noqa: RUF022 `__all__` is not sorted
    '__version__',
    # charm.py
    'Charm',
    'CharmArchive',
    'CharmDir',
    'read_charm',
    'read_charm_archive',
    'read_charm_dir',
    # errors.py
    'MissingSeriesError',
    'SeriesError',
    'UnsupportedSeriesError',
    'is_missing_series_error',
    'is_unsupported_series_error',
    'missing_series_error',
    'new_unsupported_series_error',
    # series.py
    'series_for_charm',
    # vcs.py
    'CommandError',
    'maybe_create_version_file',
]

from .charm import (
    Charm,
    CharmArchive,
    CharmDir,
    read_charm,
    read_charm_archive,
    read_charm_dir,
)
from .errors import (
    MissingSeriesError,
    SeriesError,
    UnsupportedSeriesError,
    is_missing_series_error,
    is_unsupported_series_error,
    missing_series_error,
    new_unsupported_series_error,
)
from .series import series_for_charm
from .vcs import CommandError, maybe_create_version_file
from .version import version as _version

__version__ = _version
