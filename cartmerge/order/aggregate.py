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

import logging
import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, nullcontext

from cartmerge.core.config import OrderConfig
from cartmerge.order.errors import IncorrectItemError
from cartmerge.order.keys import MergeKey, merge_key, same_line
from cartmerge.order.types import Item
from cartmerge.order.validate import validate_item

logger = logging.getLogger(__name__)


class Order:
    """
    Shopping order holding merged line items.

    Guarantees:
    - every held item has quantity > 0 and price >= 0
    - no two held items share the same (product, price) pair
    - a rejected item leaves the order untouched

    Items are kept in the order they were first accepted.
    """

    def __init__(self, config: OrderConfig | None = None) -> None:
        self._config = config or OrderConfig()
        self._items: list[Item] = []
        self._index: dict[MergeKey, Item] = {}
        self._unindexed: list[Item] = []  # lines whose product cannot be hashed
        self._lock: AbstractContextManager = threading.RLock() if self._config.thread_safe else nullcontext()

    @property
    def config(self) -> OrderConfig:
        return self._config

    def add_item(self, candidate: Item) -> None:
        """
        Add ``candidate`` to the order.

        If an item with the same product and exactly the same price is already
        held, its quantity grows by ``candidate.quantity`` and the candidate is
        dropped. Otherwise the candidate itself becomes a new line.

        Raises:
            IncorrectItemError if the price is negative or the quantity is
            not positive.
        """
        with self._lock:
            try:
                validate_item(candidate)
            except IncorrectItemError as e:
                logger.debug("Rejected item for product %s: %s", candidate.product, e.code)
                raise

            existing = self._find(candidate)
            if existing is not None:
                existing.quantity += candidate.quantity
                logger.debug(
                    "Merged %d x %s @ %r into existing line (now %d)",
                    candidate.quantity,
                    candidate.product,
                    candidate.price,
                    existing.quantity,
                )
                return

            self._items.append(candidate)
            if self._config.indexed:
                self._remember(candidate)
            logger.debug("Added line %d x %s @ %r", candidate.quantity, candidate.product, candidate.price)

    def get_items(self) -> tuple[Item, ...]:
        """Snapshot of the held items, in insertion order."""
        with self._lock:
            return tuple(self._items)

    # camelCase aliases of the public API
    addItem = add_item
    getItems = get_items

    @property
    def items(self) -> tuple[Item, ...]:
        return self.get_items()

    def _remember(self, item: Item) -> None:
        key = merge_key(item)
        if key is None:
            return
        try:
            self._index[key] = item
        except TypeError:
            self._unindexed.append(item)

    def _find(self, candidate: Item) -> Item | None:
        if not self._config.indexed:
            return _scan(self._items, candidate)

        key = merge_key(candidate)
        if key is not None:
            try:
                found = self._index.get(key)
            except TypeError:
                return _scan(self._items, candidate)
            if found is not None:
                return found
        return _scan(self._unindexed, candidate)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.get_items())

    def __contains__(self, item: object) -> bool:
        return any(held is item for held in self.get_items())

    def __repr__(self) -> str:
        return f"Order(items={len(self)}, indexed={self._config.indexed})"


def _scan(items: list[Item], candidate: Item) -> Item | None:
    for item in items:
        if same_line(item, candidate):
            return item
    return None
