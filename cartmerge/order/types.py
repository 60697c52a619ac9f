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

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# Product


@dataclass(frozen=True, slots=True)
class Product:
    """
    Identity of something that can be ordered.

    Two products are equal iff their ids are equal. ``name`` is descriptive
    only and never takes part in equality or hashing.
    """

    id: int
    name: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} (#{self.id})"
        return f"#{self.id}"


# Item protocol


@runtime_checkable
class Item(Protocol):
    """
    Line item contract accepted by Order.

    Any object exposing ``product``, ``price`` and a writable ``quantity``
    conforms. Order never depends on a concrete implementation.
    """

    quantity: int

    @property
    def product(self) -> Product: ...

    @property
    def price(self) -> float: ...


# Default implementation


_READ_ONLY = ("product", "price")


@dataclass(slots=True, eq=False)
class LineItem:
    """
    Plain Item implementation.

    ``product`` and ``price`` are fixed once set; only ``quantity`` changes,
    and only through the Order that owns the line.
    """

    product: Product
    quantity: int
    price: float

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY and hasattr(self, name):
            raise AttributeError(f"LineItem.{name} is read-only")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"LineItem(product={self.product.id}, quantity={self.quantity}, price={self.price!r})"
