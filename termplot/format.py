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

import math

# Precision selectors recognised in a label format string, checked in order.
_PRECISIONS = ((":.2", 2), (":.1", 1), (":.0", 0))
_FALLBACK_DECIMALS = 2


def decimals_for(label_format: str) -> int:
    """
    Number of decimal places selected by ``label_format``.

    Only the ``{:.2}``, ``{:.1}`` and ``{:.0}`` forms are recognised;
    anything else falls back to two decimals.
    """
    for marker, decimals in _PRECISIONS:
        if marker in label_format:
            return decimals
    return _FALLBACK_DECIMALS


def format_value(value: float, label_format: str) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{decimals_for(label_format)}f}"
