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

from importlib.metadata import PackageNotFoundError, version


def _detect_version() -> str:
    """
    Detect termplot version.

    Falls back to a development placeholder if the package metadata
    is not available.
    """
    try:
        return version("termplot")
    except PackageNotFoundError:
        return "0.0.0-dev"


__version__ = _detect_version()
