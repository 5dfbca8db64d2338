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

"""Settings for the jujucharm command line, read from the environment."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path

__all__ = ('ToolContext',)


@dataclasses.dataclass(frozen=True, kw_only=True)
class ToolContext:
    """Settings the ``jujucharm`` command takes from environment variables.

    Rather than reading the environment directly, use
    :meth:`ToolContext.from_environ`. Command line arguments override all of these.
    """

    charm_dir: Path
    """The charm to operate on when no path is given.

    From ``JUJU_CHARM_DIR``, or the current directory if that is not set.
    """

    debug: bool = False
    """Whether to log at DEBUG level (``JUJUCHARM_DEBUG`` is set)."""

    series: str = ''
    """The series to request when none is given (from ``JUJUCHARM_SERIES``)."""

    @classmethod
    def _from_dict(cls, env: Mapping[str, str]) -> ToolContext:
        return ToolContext(
            charm_dir=(
                Path(env['JUJU_CHARM_DIR']) if env.get('JUJU_CHARM_DIR') else Path.cwd()
            ),
            debug='JUJUCHARM_DEBUG' in env,
            series=env.get('JUJUCHARM_SERIES', '').strip(),
        )

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> ToolContext:
        """Create a ``ToolContext`` from the environment.

        If environ is ``None``, ``os.environ`` will be used.
        """
        if environ is None:
            environ = os.environ
        return cls._from_dict(environ)
