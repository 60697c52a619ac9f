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

from cartmerge.order.errors import IncorrectItemError
from cartmerge.order.types import Item


def validate_item(item: Item) -> None:
    """
    Check the preconditions an item must meet before an order accepts it.

    Checks run in order and the first failure is raised:
      1. price must not be negative (zero is allowed)
      2. quantity must be strictly positive

    Nothing else is checked: product is taken as given and there is no upper
    bound on quantity.
    """
    if item.price < 0:
        raise IncorrectItemError(
            f"Item price must not be negative, got {item.price!r}",
            code="negative_price",
            details={"price": item.price},
        )

    if item.quantity <= 0:
        raise IncorrectItemError(
            f"Item quantity must be positive, got {item.quantity!r}",
            code="non_positive_quantity",
            details={"quantity": item.quantity},
        )
