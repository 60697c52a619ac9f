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

from cartmerge.reporting.renderers.json import JsonReportRenderer
from cartmerge.reporting.renderers.text import TextReportRenderer
from cartmerge.reporting.types import LineView, OrderReport, Rejection, Summary

__all__ = [
    "LineView",
    "Rejection",
    "Summary",
    "OrderReport",
    "JsonReportRenderer",
    "TextReportRenderer",
]
