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

from collections.abc import Mapping
from typing import Any

# CI-friendly semantics
EXIT_OK = 0
EXIT_REJECTED_ITEMS = 1
EXIT_ENGINE_ERROR = 2


def exit_code_from_report_dict(report: Mapping[str, Any]) -> int:
    """
    Determine exit code from a dict-shaped report (OrderReport.to_dict()).
    Policy:
      - any rejected line => EXIT_REJECTED_ITEMS
      - else EXIT_OK
    """
    summary = report.get("summary")
    rejected = summary.get("rejected", 0) if isinstance(summary, Mapping) else 0
    if isinstance(rejected, int) and rejected > 0:
        return EXIT_REJECTED_ITEMS
    return EXIT_OK
