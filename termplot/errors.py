# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Termplot Contributors
#
# This file is part of Termplot.
#
# Termplot is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Termplot is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from enum import auto

from termplot.utils.enum import StrEnum


class ChartErrorKind(StrEnum):
    """
    Category of a rendering failure.

    The kind is the whole payload of a chart error: the human-readable
    message is derived from it, never passed in.
    """

    EMPTY_DATA = auto()
    INVALID_RANGE = auto()
    INVALID_DIMENSIONS = auto()

    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ChartErrorKind.EMPTY_DATA: "Cannot plot empty data",
    ChartErrorKind.INVALID_RANGE: "Invalid min/max range",
    ChartErrorKind.INVALID_DIMENSIONS: "Invalid chart dimensions",
}


class ChartError(Exception):
    """
    Base class for all rendering errors.

    Raised by `render()` and `ChartConfig.validate()`. The convenience
    helpers catch it and return ``str(error)`` as the chart text.
    """

    kind: ChartErrorKind

    def __init__(self, kind: ChartErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.message())

    @property
    def message(self) -> str:
        return self.kind.message()

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChartError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class EmptyDataError(ChartError):
    """Raised when the series has no samples."""

    def __init__(self) -> None:
        super().__init__(ChartErrorKind.EMPTY_DATA)


class InvalidRangeError(ChartError):
    """Raised when the explicit or derived min/max cannot be used."""

    def __init__(self) -> None:
        super().__init__(ChartErrorKind.INVALID_RANGE)


class InvalidDimensionsError(ChartError):
    """Raised when height or width is not positive."""

    def __init__(self) -> None:
        super().__init__(ChartErrorKind.INVALID_DIMENSIONS)
