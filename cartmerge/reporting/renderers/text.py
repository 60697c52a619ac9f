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

from typing import Literal

from cartmerge.reporting.types import LineView, OrderReport, Rejection

Verbosity = Literal["quiet", "normal", "verbose"]


class TextReportRenderer:
    """
    Human-readable CLI output. Pure rendering: does not sort or mutate.

    Verbosity levels:
    - quiet: one-line summary only
    - normal: summary + lines + rejections
    - verbose: header and full summary counters as well
    """

    def __init__(self, verbosity: Verbosity = "normal"):
        self.verbosity = verbosity

    def render(self, report: OrderReport) -> str:
        if self.verbosity == "quiet":
            return self._summary_line(report) + "\n"

        lines: list[str] = []

        if self.verbosity == "verbose":
            lines.append(f"{report.tool} {report.version}")
            s = report.summary
            lines.append("Summary:")
            lines.append(f"  lines_processed: {s.lines_processed}")
            lines.append(f"  lines: {s.lines}")
            lines.append(f"  merged: {s.merged}")
            lines.append(f"  rejected: {s.rejected}")
            lines.append(f"  total_quantity: {s.total_quantity}")
            lines.append("")
        else:
            lines.append(self._summary_line(report))
            lines.append("")

        if report.lines:
            lines.append("Lines:")
            for v in report.lines:
                lines.append(self._render_line(v))
        else:
            lines.append("Order is empty.")

        if report.rejections:
            lines.append("")
            lines.append("Rejected:")
            for r in report.rejections:
                lines.extend(self._render_rejection(r))

        if report.stopped_early:
            lines.append("")
            lines.append("Stopped at first rejected line (use --keep-going to continue).")

        return "\n".join(lines).rstrip() + "\n"

    def _summary_line(self, report: OrderReport) -> str:
        s = report.summary
        text = f"{s.lines} lines, {s.total_quantity} units ({s.merged} merged)"
        if s.rejected:
            return f"✗ {text}, {s.rejected} rejected"
        return f"✓ {text}"

    def _render_line(self, v: LineView) -> str:
        label = f"{v.product_name} (#{v.product_id})" if v.product_name else f"#{v.product_id}"
        return f"  {v.quantity:>6} x {label} @ {v.price:g}"

    def _render_rejection(self, r: Rejection) -> list[str]:
        return [f"  ! line {r.position} [{r.code}]", f"    {r.message}"]
