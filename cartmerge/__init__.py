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

from cartmerge._version import __version__
from cartmerge.core.config import CartmergeConfig, OrderConfig
from cartmerge.order import (
    IncorrectItemError,
    IncorrectItemException,
    Item,
    LineItem,
    Order,
    OrderError,
    Product,
)

__all__ = [
    "__version__",
    "Order",
    "OrderConfig",
    "CartmergeConfig",
    "Item",
    "LineItem",
    "Product",
    "OrderError",
    "IncorrectItemError",
    "IncorrectItemException",
]
