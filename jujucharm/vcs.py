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

"""Stamp a charm source tree with a version taken from its revision control."""

from __future__ import annotations

import logging
import os
import pathlib
import subprocess
from typing import Callable, Optional, Sequence, Union

__all__ = ('CommandError', 'maybe_create_version_file', 'run_combined')

logger = logging.getLogger(__name__)

# Checked in this order; the first marker found selects the command.
_VCS_COMMANDS = (
    ('.git', ('git', 'describe', '--dirty')),
    ('.bzr', ('bzr', 'revision-info')),
    ('.hg', ('hg', 'id', '--id')),
)

_Runner = Callable[[Sequence[str], pathlib.Path], bytes]


class CommandError(Exception):
    """Raised when a revision control command exits with a non-zero code."""

    returncode: int
    """Exit status of the child process."""

    cmd: list[str]
    """The full command that was run."""

    output: bytes = b''
    """Combined stdout and stderr of the child process."""

    def __init__(self, *, returncode: int, cmd: Sequence[str], output: bytes = b''):
        self.returncode = returncode
        self.cmd = list(cmd)
        self.output = output
        super().__init__(f'command {self.cmd!r} exited with status {returncode}')


def run_combined(args: Sequence[str], cwd: pathlib.Path) -> bytes:
    """Run a command in cwd and return its stdout and stderr as one byte string.

    This blocks until the command exits; there is no timeout.

    Raises:
        CommandError: the command exited with a non-zero code.
        OSError: the command could not be started (for example, it is not installed).
    """
    try:
        result = subprocess.run(
            list(args), cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=True
        )
    except subprocess.CalledProcessError as e:
        raise CommandError(returncode=e.returncode, cmd=args, output=e.output or b'') from None
    return result.stdout


def maybe_create_version_file(
    path: Union[str, 'os.PathLike[str]'], *, run: _Runner = run_combined
) -> Optional[bytes]:
    """Create or overwrite the ``version`` file of the charm source tree at path.

    The version is the output of ``git describe --dirty``, ``bzr revision-info``
    or ``hg id --id``, depending on which of ``.git``, ``.bzr`` or ``.hg`` is found
    in path first (in that order). It is written exactly as the tool printed it.
    If path is not under revision control, nothing is written.

    Args:
        path: the root of the charm source tree.
        run: runs a command in a directory and returns its combined output.
            Tests replace this to avoid needing the real tools.

    Returns:
        The bytes written to the version file, or ``None`` if path is not
        under revision control.

    Raises:
        CommandError: the revision control command failed. The version file
            is left untouched.
        OSError: the command could not be started, or the version file could
            not be written.
    """
    root = pathlib.Path(path)
    for marker, cmd in _VCS_COMMANDS:
        if (root / marker).exists():
            break
    else:
        logger.info('Charm is not in revision control directory')
        return None

    try:
        output = run(cmd, root)
    except CommandError as e:
        logger.info('Command output: %r', e.output)
        raise
    except OSError as e:
        logger.info('Could not run %r: %s', list(cmd), e)
        raise

    # Truncated on open: the file holds only the latest output.
    with (root / 'version').open('wb') as f:
        f.write(output)
    logger.debug('Wrote version %r to %s', output, root / 'version')
    return output
