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

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from cartmerge.order.types import Item

# Line and rejection views


@dataclass(frozen=True, slots=True)
class LineView:
    """
    Read-only rendering view of one order line.
    """

    product_id: int
    product_name: str | None
    quantity: int
    price: float

    @staticmethod
    def from_item(item: Item) -> "LineView":
        return LineView(
            product_id=item.product.id,
            product_name=item.product.name,
            quantity=item.quantity,
            price=item.price,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "product": {"id": self.product_id, "name": self.product_name},
            "quantity": self.quantity,
            "price": self.price,
        }


@dataclass(frozen=True, slots=True)
class Rejection:
    """
    An input line the order refused.
    """

    position: int  # 1-based position in the input file
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"position": self.position, "code": self.code, "message": self.message}


# Report (root)


@dataclass(frozen=True, slots=True)
class Summary:
    lines_processed: int
    lines: int  # lines held by the order after merging
    merged: int
    rejected: int
    total_quantity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines_processed": self.lines_processed,
            "lines": self.lines,
            "merged": self.merged,
            "rejected": self.rejected,
            "total_quantity": self.total_quantity,
        }


@dataclass(frozen=True, slots=True)
class OrderReport:
    """
    Outcome of replaying item lines into an order.
    """

    tool: str
    version: str
    summary: Summary
    lines: tuple[LineView, ...] = field(default_factory=tuple)
    rejections: tuple[Rejection, ...] = field(default_factory=tuple)
    stopped_early: bool = False

    @staticmethod
    def build(
        *,
        items: Iterable[Item],
        lines_processed: int,
        rejections: Iterable[Rejection] = (),
        stopped_early: bool = False,
        tool_version: str = "0.0.0-dev",
    ) -> "OrderReport":
        views = tuple(LineView.from_item(i) for i in items)
        rejected = tuple(rejections)
        summary = Summary(
            lines_processed=lines_processed,
            lines=len(views),
            merged=lines_processed - len(views) - len(rejected),
            rejected=len(rejected),
            total_quantity=sum(v.quantity for v in views),
        )
        return OrderReport(
            tool="cartmerge",
            version=tool_version,
            summary=summary,
            lines=views,
            rejections=rejected,
            stopped_early=stopped_early,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool": self.tool,
            "version": self.version,
            "summary": self.summary.to_dict(),
            "lines": [v.to_dict() for v in self.lines],
            "rejections": [r.to_dict() for r in self.rejections],
            "stopped_early": self.stopped_early,
        }
