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

"""Errors raised while choosing the series to deploy a charm to."""

from __future__ import annotations

from typing import Sequence

__all__ = (
    'MissingSeriesError',
    'SeriesError',
    'UnsupportedSeriesError',
    'is_missing_series_error',
    'is_unsupported_series_error',
    'missing_series_error',
    'new_unsupported_series_error',
)


class SeriesError(Exception):
    """Base class for errors raised when a series cannot be determined for a charm."""


class MissingSeriesError(SeriesError):
    """Raised when no series was requested and the charm does not declare any.

    Only the shared :data:`missing_series_error` instance is ever raised by this
    library; use :func:`is_missing_series_error` to check for it.
    """


class UnsupportedSeriesError(SeriesError):
    """Raised when the requested series is not one the charm supports."""

    requested_series: str
    """The series that was asked for."""

    supported_series: list[str]
    """The series the charm declares, in declaration order."""

    def __init__(self, requested_series: str, supported_series: Sequence[str]):
        self.requested_series = requested_series
        self.supported_series = list(supported_series)
        super().__init__(
            f'series "{requested_series}" not supported by charm, '
            f'supported series are: {",".join(self.supported_series)}'
        )


missing_series_error = MissingSeriesError('series not specified and charm does not define any')
"""Raised when a legacy charm declares no series and none was requested."""


def is_missing_series_error(err: BaseException | None) -> bool:
    """Report whether err is the shared :data:`missing_series_error`."""
    return err is missing_series_error


def new_unsupported_series_error(
    requested_series: str, supported_series: Sequence[str]
) -> UnsupportedSeriesError:
    """Return an error saying requested_series is not one of supported_series.

    This is for callers that validate series outside :func:`~jujucharm.series_for_charm`
    but want to report the failure in the same shape.
    """
    return UnsupportedSeriesError(requested_series, supported_series)


def is_unsupported_series_error(err: BaseException | None) -> bool:
    """Report whether err is an :class:`UnsupportedSeriesError`."""
    return isinstance(err, UnsupportedSeriesError)
