# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Cartmerge Contributors
#
# This file is part of Cartmerge.
#
# Cartmerge is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Cartmerge is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json

from cartmerge.reporting.types import OrderReport


class JsonReportRenderer:
    """
    Machine-readable output. Keys are sorted so output is stable across runs.
    """

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def render(self, report: OrderReport) -> str:
        return json.dumps(report.to_dict(), sort_keys=True, indent=self.indent, ensure_ascii=False) + "\n"
