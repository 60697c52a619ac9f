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

from cartmerge.order.types import Item, Product

MergeKey = tuple[Product, float]


def merge_key(item: Item) -> MergeKey | None:
    """
    Identity under which items merge: (product, price).

    Product equality is id equality, and price must match exactly, so the key
    hashes and compares exactly like ``same_line`` does.

    Returns None for NaN prices: they never equal anything, so such lines
    must never be found again.
    """
    price = item.price
    if price != price:
        return None
    return (item.product, price)


def same_line(a: Item, b: Item) -> bool:
    """True if ``b`` would be merged into ``a``."""
    return a.product == b.product and a.price == b.price
