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

from cartmerge.order.aggregate import Order
from cartmerge.order.errors import IncorrectItemError, IncorrectItemException, OrderError
from cartmerge.order.keys import MergeKey, merge_key, same_line
from cartmerge.order.loader import DefaultItemsLoader, ItemsLoadError
from cartmerge.order.types import Item, LineItem, Product
from cartmerge.order.validate import validate_item

__all__ = [
    # Types
    "Product",
    "Item",
    "LineItem",
    # Aggregate
    "Order",
    # Identity / validation
    "MergeKey",
    "merge_key",
    "same_line",
    "validate_item",
    # Loading
    "DefaultItemsLoader",
    "ItemsLoadError",
    # Errors
    "OrderError",
    "IncorrectItemError",
    "IncorrectItemException",
]
