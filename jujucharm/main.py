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

"""The ``jujucharm`` command: inspect a charm, pick its series, stamp its version."""

from __future__ import annotations

import argparse
import logging
import sys
import zipfile
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, TextIO

import rich.logging

from . import charm as _charm
from . import series as _series
from . import vcs
from ._private import yaml
from .context import ToolContext
from .errors import SeriesError
from .version import version

logger = logging.getLogger(__name__)


def _setup_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(message)s',
        handlers=[rich.logging.RichHandler(show_path=False)],
    )


def _cmd_info(args: argparse.Namespace, ctx: ToolContext, out: TextIO) -> int:
    charm = _charm.read_charm(args.path)
    info = {
        'name': charm.meta.get('name', ''),
        'kind': 'directory' if isinstance(charm, _charm.CharmDir) else 'archive',
        'revision': charm.revision,
        'version': charm.version,
        'series': charm.supported_series,
        'actions': sorted(charm.actions),
        'options': sorted(charm.config.get('options') or {}),
        'metrics': sorted(charm.metrics.get('metrics') or {}),
    }
    yaml.safe_dump(info, out)
    return 0


def _cmd_series(args: argparse.Namespace, ctx: ToolContext, out: TextIO) -> int:
    charm = _charm.read_charm(args.path)
    requested = args.series if args.series is not None else ctx.series
    try:
        resolved = _series.series_for_charm(requested, charm.supported_series)
    except SeriesError as e:
        logger.error('%s', e)
        return 1
    print(resolved, file=out)
    return 0


def _cmd_stamp(args: argparse.Namespace, ctx: ToolContext, out: TextIO) -> int:
    try:
        stamped = vcs.maybe_create_version_file(args.path)
    except vcs.CommandError as e:
        logger.error('Could not determine the charm version: %s', e)
        return 1
    if stamped is not None:
        print(stamped.decode(errors='replace').strip(), file=out)
    return 0


_COMMANDS: Dict[str, Callable[[argparse.Namespace, ToolContext, TextIO], int]] = {
    'info': _cmd_info,
    'series': _cmd_series,
    'stamp': _cmd_stamp,
}


def _parser(ctx: ToolContext) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='jujucharm', description=__doc__)
    parser.add_argument('--version', action='version', version=f'%(prog)s {version}')
    parser.add_argument(
        '--debug',
        action='store_true',
        default=ctx.debug,
        help='Log at DEBUG level (also enabled by JUJUCHARM_DEBUG)',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help='Show what a charm declares')
    series = subparsers.add_parser('series', help='Print the series a charm would deploy to')
    series.add_argument(
        '--series',
        '-s',
        default=None,
        help='Requested series (defaults to JUJUCHARM_SERIES, then the charm default)',
    )
    stamp = subparsers.add_parser('stamp', help='Write the version file of a charm source tree')
    for sub in (info, series, stamp):
        sub.add_argument(
            'path',
            nargs='?',
            default=ctx.charm_dir,
            type=Path,
            help='Charm directory or archive (defaults to JUJU_CHARM_DIR, then the cwd)',
        )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    ctx: Optional[ToolContext] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Run the ``jujucharm`` command and return its exit code."""
    if ctx is None:
        ctx = ToolContext.from_environ()
    if out is None:
        out = sys.stdout
    args = _parser(ctx).parse_args(argv)
    _setup_logging(args.debug)
    try:
        return _COMMANDS[args.command](args, ctx, out)
    except (OSError, ValueError, TypeError, yaml.YAMLError, zipfile.BadZipFile) as e:
        logger.error('%s failed for %s: %s', args.command, args.path, e)
        return 1


def main_entry():
    """Console script entry point."""
    sys.exit(main())
