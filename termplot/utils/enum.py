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

from enum import Enum


class StrEnum(str, Enum):
    """
    String-valued enum whose ``auto()`` values are the lowercase member names.

    Members compare equal to their string value, so they serialize cleanly
    to JSON and CLI output.
    """

    def _generate_next_value_(name, start, count, last_values):  # type: ignore[override]
        return name.lower()

    def __str__(self) -> str:
        return str(self.value)
