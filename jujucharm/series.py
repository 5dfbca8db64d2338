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

"""Choose the series a charm is deployed to."""

from __future__ import annotations

from typing import Sequence

from .errors import UnsupportedSeriesError, missing_series_error

__all__ = ('series_for_charm',)


def series_for_charm(requested_series: str, supported_series: Sequence[str]) -> str:
    """Return the series to deploy a charm to.

    If the charm declares no series (an older charm), the requested series is
    used as-is. Otherwise an empty request selects the charm's default, which is
    the first series it declares, and anything else must be one of the declared
    series. Comparison is exact; nothing is case-folded or trimmed.

    Args:
        requested_series: the series asked for by the caller, or ``''``.
        supported_series: the series the charm declares, in declaration order.

    Raises:
        MissingSeriesError: neither the caller nor the charm named a series.
            This is always :data:`~jujucharm.errors.missing_series_error`.
        UnsupportedSeriesError: the requested series is not declared by the charm.
    """
    if not supported_series:
        if not requested_series:
            # The sentinel is shared: drop what earlier raises attached to it.
            err = missing_series_error.with_traceback(None)
            err.__context__ = None
            raise err from None
        return requested_series
    if not requested_series:
        return supported_series[0]
    for series in supported_series:
        if series == requested_series:
            return requested_series
    raise UnsupportedSeriesError(requested_series, supported_series)
