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

"""Helper to define the version of the jujucharm project.

This is the version of the library itself, not of any charm; see
:func:`jujucharm.maybe_create_version_file` for stamping charms.
"""

import subprocess
from pathlib import Path

__all__ = ('version',)

_FALLBACK = '0.1'  # this gets bumped after release


def _get_version():
    version = _FALLBACK + '.dev0+unknown'

    p = Path(__file__).parent
    if (p.parent / '.git').exists():
        try:
            proc = subprocess.run(
                ['git', 'describe', '--tags', '--dirty'],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                cwd=p,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError):
            pass
        else:
            version = proc.stdout.strip().decode('utf8')
            if '-' in version:
                # <tag>-<#commits>-g<hex>[-dirty] becomes the PEP 440 local
                # version <tag>+<#commits>.g<hex>[.dirty]
                public, local = version.split('-', 1)
                version = public + '+' + local.replace('-', '.')
    return version


version = _get_version()
