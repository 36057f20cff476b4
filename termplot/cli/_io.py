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

import re
import sys
from pathlib import Path
from typing import TextIO

_SEPARATORS = re.compile(r"[\s,;]+")


class SeriesParseError(ValueError):
    """Raised when input text contains a token that is not a number."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f"not a number at position {position}: {token!r}")


def parse_series(text: str) -> list[float]:
    """
    Parse whitespace/comma separated numbers.

    ``nan``, ``inf`` and ``-inf`` are accepted (any case), so gaps in the
    data survive the round trip into the renderer.
    """
    values: list[float] = []
    for pos, token in enumerate(t for t in _SEPARATORS.split(text) if t):
        try:
            values.append(float(token))
        except ValueError:
            raise SeriesParseError(token, pos) from None
    return values


def read_series(path: str | None, stdin: TextIO | None = None) -> list[float]:
    if path is None or path == "-":
        return parse_series((stdin or sys.stdin).read())

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Path does not exist: {p}")
    return parse_series(p.read_text(encoding="utf-8"))
